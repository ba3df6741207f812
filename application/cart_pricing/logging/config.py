"""
Logging configuration for the cart pricing engine.
Firehose-first with local file fallback.
"""

# Settings
from cart_pricing.config.settings import PricingConfigs
configs = PricingConfigs()

class LoggingConfig:
    """Logging configuration resolved once at import time"""

    # Core settings
    FIREHOSE_ENABLED = configs.FIREHOSE_ENABLED
    LOG_DIR = configs.LOG_DIR
    LOG_LEVEL = configs.LOG_LEVEL

    # Stream Names
    APP_LOGS_STREAM_NAME = configs.APP_LOGS_STREAM_NAME

    # Buffer sizes
    APP_LOGS_CAPACITY = configs.APP_LOGS_CAPACITY

    # Firehose settings
    FIREHOSE_REGION_NAME = configs.FIREHOSE_REGION_NAME
    FIREHOSE_ACCESS_KEY_ID = configs.FIREHOSE_ACCESS_KEY_ID
    FIREHOSE_SECRET_ACCESS_KEY = configs.FIREHOSE_SECRET_ACCESS_KEY
    FIREHOSE_RETRY_COUNT = configs.FIREHOSE_RETRY_COUNT
    FIREHOSE_RETRY_DELAY = configs.FIREHOSE_RETRY_DELAY

    # Slack settings
    SLACK_WEBHOOK_URL = configs.SLACK_WEBHOOK_URL
    SLACK_ALERTS_ENABLED = configs.SLACK_ALERTS_ENABLED

    @classmethod
    def is_valid_config(cls):
        """Validate configuration - only check Firehose when enabled"""
        if cls.FIREHOSE_ENABLED:
            if not cls.FIREHOSE_ACCESS_KEY_ID or not cls.FIREHOSE_SECRET_ACCESS_KEY:
                return False, "Firehose credentials not configured"
        if cls.SLACK_ALERTS_ENABLED and not cls.SLACK_WEBHOOK_URL:
            return False, "SLACK_ALERTS_ENABLED is true but SLACK_WEBHOOK_URL is not configured"
        return True, "Configuration is valid"
