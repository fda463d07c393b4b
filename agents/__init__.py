"""
Agent orchestration module for the FAQ Router Bot
"""

from .faq_agent import AgentResult, FaqAgent, ToolSequenceError, fallback_request_classification

__all__ = [
    'AgentResult',
    'FaqAgent',
    'ToolSequenceError',
    'fallback_request_classification'
]
