"""
News tools for agent orchestration
"""

import logging
from typing import List

from langchain_core.tools import tool

import response_formatters as fmt
from config import NEWS_CONFIG
from intent.router import NewsProvider
from news_client.news_client import NewsArticle

logger = logging.getLogger(__name__)


def build_news_tools(news_provider: NewsProvider) -> list:

    @tool
    async def fetch_news(source: str = NEWS_CONFIG["default_source"],
                         limit: int = NEWS_CONFIG["default_limit"]) -> dict:
        """Fetch the latest news articles from a configured feed (default, rss, api)."""
        result = await news_provider.fetch_articles(source, limit)
        return result.model_dump()

    @tool
    def format_news_response(articles: List[NewsArticle], source: str) -> dict:
        """Format fetched news articles as a chat reply."""
        logger.info(f"🔧 [Format News Tool] Formatting {len(articles)} articles from {source}")
        articles = [NewsArticle.model_validate(article) for article in articles]
        return {"formatted_response": fmt.format_news_articles(articles, source)}

    return [fetch_news, format_news_response]
