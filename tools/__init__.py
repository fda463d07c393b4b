# Tools package for agent orchestration

from .faq_tools import FaqResult, build_faq_tools
from .news_tools import build_news_tools

__all__ = [
    'FaqResult',
    'build_faq_tools',
    'build_news_tools'
]
