"""
FAQ Router
Classifies an incoming chat message and builds the reply: help menu, news,
category FAQs or keyword search over the knowledge base
"""

import asyncio
import logging
from typing import List, Literal, Optional, Protocol

from pydantic import BaseModel

import response_formatters as fmt
from config import KNOWLEDGE_BASE_CONFIG, LOGGING_CONFIG, NEWS_CONFIG
from knowledge.knowledge_base import KnowledgeBase
from news_client.news_client import NewsResult
from .intent_rules import Intent, classify_message

logger = logging.getLogger(__name__)

ResponseType = Literal["help", "category_list", "category_faqs", "faq_results", "news", "default"]


class RouteResponse(BaseModel):
    response_text: str
    response_type: ResponseType
    matched_categories: Optional[List[str]] = None
    matched_faq_ids: Optional[List[str]] = None


class NewsProvider(Protocol):
    async def fetch_articles(self, source: str, limit: int) -> NewsResult:
        ...


def _preview(message: str) -> str:
    limit = LOGGING_CONFIG["preview_length"]
    return message[:limit] + ("..." if len(message) > limit else "")


class FaqRouter:
    """
    Single entry point for transports and agents. `route` never raises.
    """

    def __init__(self, knowledge_base: KnowledgeBase, news_provider: Optional[NewsProvider] = None,
                 max_results: int = KNOWLEDGE_BASE_CONFIG["search_max_results"]):
        self.knowledge_base = knowledge_base
        self.news_provider = news_provider
        self.max_results = max_results

    def reload(self, knowledge_base: KnowledgeBase) -> None:
        """Swap in a whole new knowledge base."""
        self.knowledge_base = knowledge_base
        logger.info(f"🔄 [FAQ Router] Knowledge base replaced: {knowledge_base!r}")

    async def route(self, message: str, conversation_id: str = "") -> RouteResponse:
        logger.info(f"🔧 [FAQ Router] Processing message chat={conversation_id} preview='{_preview(message)}'")

        # one read per call so a concurrent reload never mixes two bases
        knowledge_base = self.knowledge_base

        try:
            match = classify_message(message, knowledge_base.list_categories())
            logger.info(f"📝 [FAQ Router] Detected intent: {match.intent.value}")

            if match.intent == Intent.HELP:
                return self._handle_help(knowledge_base)
            if match.intent == Intent.NEWS:
                return await self._handle_news()
            if match.intent == Intent.CATEGORY:
                return self._handle_category(knowledge_base, match.category)
            return self._handle_search(knowledge_base, message)

        except Exception as e:
            logger.error(f"❌ [FAQ Router] Error processing message chat={conversation_id}: {type(e).__name__}: {e}")
            return RouteResponse(response_text=fmt.format_error_response(), response_type="default")

    def _handle_help(self, knowledge_base: KnowledgeBase) -> RouteResponse:
        categories = knowledge_base.list_categories()
        logger.info(f"✅ [FAQ Router] Generated help response with {len(categories)} categories")
        return RouteResponse(
            response_text=fmt.format_help_response(categories),
            response_type="help",
            matched_categories=categories
        )

    async def _handle_news(self) -> RouteResponse:
        unavailable = RouteResponse(response_text=fmt.format_news_unavailable(), response_type="default")

        if self.news_provider is None:
            logger.error("❌ [FAQ Router] No news provider configured")
            return unavailable

        try:
            result = await asyncio.wait_for(
                self.news_provider.fetch_articles(NEWS_CONFIG["default_source"], NEWS_CONFIG["default_limit"]),
                timeout=NEWS_CONFIG["timeout"]
            )
            if result.error or not result.articles:
                logger.error(f"❌ [FAQ Router] News fetch returned nothing usable: {result.error or 'no articles'}")
                return unavailable

            response_text = fmt.format_news_articles(result.articles, result.source)
        except Exception as e:
            logger.error(f"❌ [FAQ Router] News provider failed: {type(e).__name__}: {e}")
            return unavailable

        logger.info(f"✅ [FAQ Router] Formatted {len(result.articles)} news articles from {result.source}")
        return RouteResponse(response_text=response_text, response_type="news")

    def _handle_category(self, knowledge_base: KnowledgeBase, category: str) -> RouteResponse:
        entries = knowledge_base.by_category(category)

        if not entries:
            categories = knowledge_base.list_categories()
            logger.info(f"📝 [FAQ Router] Category '{category}' not found, listing {len(categories)} categories")
            return RouteResponse(
                response_text=fmt.format_category_not_found(category, categories),
                response_type="category_list",
                matched_categories=categories
            )

        logger.info(f"✅ [FAQ Router] Generated category response for '{category}' with {len(entries)} items")
        return RouteResponse(
            response_text=fmt.format_category_faqs(category, entries),
            response_type="category_faqs",
            matched_faq_ids=[entry.id for entry in entries]
        )

    def _handle_search(self, knowledge_base: KnowledgeBase, message: str) -> RouteResponse:
        results = knowledge_base.search(message, self.max_results)

        if not results:
            logger.info("📝 [FAQ Router] No FAQ matches found")
            return RouteResponse(response_text=knowledge_base.default_response, response_type="default")

        matched_ids = [entry.id for entry in results]
        logger.info(f"✅ [FAQ Router] Search matched {matched_ids}")
        return RouteResponse(
            response_text=fmt.format_search_results(results, knowledge_base.default_response),
            response_type="faq_results",
            matched_faq_ids=matched_ids
        )
