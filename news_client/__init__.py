"""
News feed integration module for the FAQ Router Bot
Contains the news client and article models
"""

from .news_client import NewsArticle, NewsClient, NewsResult

__all__ = [
    'NewsArticle',
    'NewsClient',
    'NewsResult'
]
