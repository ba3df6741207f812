
import os
from dotenv import load_dotenv
load_dotenv()

class PricingConfigs:
    def __init__(self):

        # Environment settings
        self.APPLICATION_ENVIRONMENT = os.getenv("APPLICATION_ENVIRONMENT", "UAT")
        self.APP_NAME = os.getenv('APP_NAME', 'cart-pricing')

        # Campaign catalog settings (empty means the built-in catalog)
        self.CAMPAIGNS_FILE = os.getenv("CAMPAIGNS_FILE", "")

        # Sentry settings
        self.SENTRY_ENABLED = os.getenv("SENTRY_ENABLED", "false").lower() == "true"
        self.SENTRY_DSN = os.getenv("SENTRY_DSN", "")
        self.ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
        self.SENTRY_RELEASE = os.getenv("SENTRY_RELEASE", "cart-pricing@1.0.0")
        self.SENTRY_TRACES_SAMPLE_RATE = os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.1")

        # Logging Core settings
        self.FIREHOSE_ENABLED = os.getenv("FIREHOSE_ENABLED", "false").lower() == "true"
        self.LOG_DEBUG_PRINTS = os.getenv("LOG_DEBUG_PRINTS", "false").lower() == "true"
        self.LOG_DIR = os.getenv("LOG_DIR", "logs")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

        # Logging Stream Names
        self.APP_LOGS_STREAM_NAME = os.getenv("APP_LOGS_STREAM_NAME", "")

        # Logging Buffer Sizes
        self.APP_LOGS_CAPACITY = int(os.getenv("APP_LOGS_CAPACITY", "50"))

        # Firehose settings
        self.FIREHOSE_REGION_NAME = os.getenv("FIREHOSE_REGION_NAME", "ap-south-1")
        self.FIREHOSE_ACCESS_KEY_ID = os.getenv("FIREHOSE_ACCESS_KEY_ID", "")
        self.FIREHOSE_SECRET_ACCESS_KEY = os.getenv("FIREHOSE_SECRET_ACCESS_KEY", "")
        self.FIREHOSE_RETRY_COUNT = int(os.getenv("FIREHOSE_RETRY_COUNT", "3"))
        self.FIREHOSE_RETRY_DELAY = int(os.getenv("FIREHOSE_RETRY_DELAY", "1"))

        # Slack alerting
        self.SLACK_WEBHOOK_URL = os.getenv("SLACK_WEBHOOK_URL", "")
        self.SLACK_ALERTS_ENABLED = os.getenv("SLACK_ALERTS_ENABLED", "false").lower() == "true"
