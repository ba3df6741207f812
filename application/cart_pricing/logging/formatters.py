"""
JSON formatters for cart pricing logs
"""
import json
import logging
from datetime import datetime

# Settings
from cart_pricing.config.settings import PricingConfigs
configs = PricingConfigs()

APPLICATION_ENVIRONMENT = configs.APPLICATION_ENVIRONMENT
SERVICE_NAME = configs.APP_NAME

class BaseJSONFormatter(logging.Formatter):
    """Basic JSON formatter"""

    def __init__(self):
        super().__init__()
        self.application_environment = APPLICATION_ENVIRONMENT

    def format(self, record):
        """Convert log record to JSON format"""
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line_number': record.lineno,
            'environment': self.application_environment,
            'service': SERVICE_NAME
        }

        # Add exception if present
        if record.exc_info:
            log_entry['exception'] = str(record.exc_info[1])

        # Add extra fields from record
        self.add_extra_fields(log_entry, record)

        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def add_extra_fields(self, log_entry, record):
        pass


class AppLogsJSONFormatter(BaseJSONFormatter):
    def add_extra_fields(self, log_entry, record):
        log_entry['evaluation_id'] = getattr(record, 'evaluation_id', '')
        log_entry['cart_token'] = getattr(record, 'cart_token', '')
        log_entry['campaign'] = getattr(record, 'campaign', '')
