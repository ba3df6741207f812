import logging

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration, ignore_logger

from cart_pricing.core.constants import ENGINE_LOGGER

# Logger
from cart_pricing.logging.utils import get_app_logger
logger = get_app_logger("sentry")

# Settings
from cart_pricing.config.settings import PricingConfigs
configs = PricingConfigs()


def init_sentry():
    """Initialize Sentry SDK with flag-based configuration"""

    if not configs.SENTRY_ENABLED:
        logger.info("Sentry monitoring is disabled")
        return

    if not configs.SENTRY_DSN:
        logger.warning("SENTRY_ENABLED is true but SENTRY_DSN is not configured")
        return

    sentry_sdk.init(
        dsn=configs.SENTRY_DSN,
        environment=configs.ENVIRONMENT,
        release=configs.SENTRY_RELEASE,
        traces_sample_rate=float(configs.SENTRY_TRACES_SAMPLE_RATE),
        integrations=[
            LoggingIntegration(
                level=logging.INFO,        # Capture info and above as breadcrumbs
                event_level=logging.ERROR  # Send errors as events
            ),
        ],
        send_default_pii=False,
        attach_stacktrace=True,
        sample_rate=1.0,
        max_breadcrumbs=50,
        before_send=before_send_filter,
    )

    # the engine calls capture_exception itself; its ERROR log would be a second event
    ignore_logger(ENGINE_LOGGER)

    logger.info(f"Sentry initialized successfully for environment: {configs.ENVIRONMENT}")


def before_send_filter(event, hint):
    """Mask discount codes before sending to Sentry"""
    extra = event.get("extra")
    if isinstance(extra, dict):
        for key in list(extra.keys()):
            if "discount_code" in key.lower():
                extra[key] = '[Filtered]'
    return event


def capture_exception(exception, **kwargs):
    """Wrapper to capture exceptions only if Sentry is enabled"""
    if configs.SENTRY_ENABLED:
        sentry_sdk.capture_exception(exception, **kwargs)


def add_breadcrumb(message, category="custom", level="info", data=None):
    """Wrapper to add breadcrumbs only if Sentry is enabled"""
    if configs.SENTRY_ENABLED:
        sentry_sdk.add_breadcrumb(
            message=message,
            category=category,
            level=level,
            data=data or {}
        )
