"""
Logging filters for the cart pricing engine
"""
import logging
from cart_pricing.core.evaluation_context import evaluation_context


class EvaluationContextFilter(logging.Filter):
    def filter(self, record):
        record.evaluation_id = getattr(evaluation_context, 'evaluation_id', None) or ''
        record.cart_token = getattr(evaluation_context, 'cart_token', None) or ''
        return True


class CampaignContextFilter(logging.Filter):
    def filter(self, record):
        record.campaign = getattr(evaluation_context, 'campaign', None) or ''
        return True
