import logging
from datetime import datetime, timezone

import requests

from cart_pricing.logging.config import LoggingConfig
from cart_pricing.logging.filters import EvaluationContextFilter, CampaignContextFilter
from cart_pricing.config.settings import PricingConfigs
configs = PricingConfigs()


class SlackErrorHandler(logging.Handler):
    """Sends ERROR and CRITICAL logs to Slack"""
    def __init__(self, webhook: str | None = None, enabled: bool | None = None):
        super().__init__(level=logging.ERROR)
        self.webhook = webhook if webhook is not None else LoggingConfig.SLACK_WEBHOOK_URL
        if enabled is None:
            enabled = LoggingConfig.SLACK_ALERTS_ENABLED
        self.enabled = bool(self.webhook) and enabled

    def build_message(self, record) -> str:
        env = configs.APPLICATION_ENVIRONMENT.upper()
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()

        lines = [
            f":mag: Monitor {env}-MONITOR Please investigate the issue.",
            "",
            "Error Details",
            f"- :clock1: Timestamp: {ts}",
            f"- :triangular_flag_on_post: Level: **{record.levelname}**",
            f"- :warning: Logger: {record.name}",
            f"- :satellite: Service: {configs.APP_NAME}",
            f"- :globe_with_meridians: Environment: {env}",
            f"- :label: Evaluation: {getattr(record, 'evaluation_id', '')}",
            f"- :shopping_trolley: Campaign: {getattr(record, 'campaign', '')}",
            f"- :file_folder: Module: {getattr(record, 'module', '')}",
            f"- :pushpin: Function: {getattr(record, 'funcName', '')}",
            f"- :straight_ruler: Line Number: {getattr(record, 'lineno', '')}",
            "- :memo: Message:",
            "",
            "```" + str(record.getMessage()) + "```",
        ]
        return "\n".join(lines)

    def emit(self, record):
        if not self.enabled:
            return
        try:
            requests.post(self.webhook, json={"text": self.build_message(record)}, timeout=2)
        except requests.RequestException:
            self.handleError(record)


# Export a singleton handler instance for reuse
slack_handler = SlackErrorHandler()
slack_handler.addFilter(EvaluationContextFilter())
slack_handler.addFilter(CampaignContextFilter())
