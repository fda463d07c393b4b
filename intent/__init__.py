"""
Intent module for the FAQ Router Bot
Contains the keyword intent rules and the FAQ router
"""

from .intent_rules import Intent, IntentMatch, INTENT_RULES, classify_message, extract_category_request
from .router import FaqRouter, RouteResponse

__all__ = [
    'Intent',
    'IntentMatch',
    'INTENT_RULES',
    'classify_message',
    'extract_category_request',
    'FaqRouter',
    'RouteResponse'
]
