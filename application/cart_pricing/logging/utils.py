"""
Logging utilities for the cart pricing engine
"""
import logging

from cart_pricing.logging.config import LoggingConfig
from cart_pricing.logging.handlers import get_app_handler, get_local_file_handler
from cart_pricing.logging.filters import EvaluationContextFilter, CampaignContextFilter
from cart_pricing.logging.slack_handler import slack_handler


def setup_app_logging(logger_name: str):
    logger = logging.getLogger(logger_name)
    logger.handlers.clear()

    handler = get_app_handler()
    handler.addFilter(EvaluationContextFilter())
    handler.addFilter(CampaignContextFilter())

    logger.addHandler(handler)
    logger.setLevel(LoggingConfig.LOG_LEVEL)
    logger.propagate = False
    return logger


essential_app_logger = None

def get_app_logger(name: str | None = None):
    global essential_app_logger
    if name:
        logger = logging.getLogger(name)
        if not logger.handlers:
            # central handler or local file handler per module
            handler = get_app_handler() if LoggingConfig.FIREHOSE_ENABLED else get_local_file_handler(name.replace('.', '_'))
            handler.addFilter(EvaluationContextFilter())
            handler.addFilter(CampaignContextFilter())
            logger.addHandler(handler)
            logger.addHandler(slack_handler)
            logger.setLevel(LoggingConfig.LOG_LEVEL)
            logger.propagate = False
        return logger
    if essential_app_logger is None:
        essential_app_logger = setup_app_logging('cart_pricing')
    return essential_app_logger


def initialize_logging():
    is_valid, message = LoggingConfig.is_valid_config()
    if not is_valid:
        print(f"Warning: {message}")
    print("Logging system initialized (cart pricing)")
