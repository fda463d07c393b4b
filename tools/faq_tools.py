"""
FAQ tools for agent orchestration
Wrap the router's knowledge base search, category lookup and formatters as
langchain tools. The tools close over the router passed to build_faq_tools.
"""

import logging
from typing import List, Optional

from langchain_core.tools import tool
from pydantic import BaseModel

import response_formatters as fmt
from config import KNOWLEDGE_BASE_CONFIG, STATIC_RESPONSES
from intent.router import FaqRouter

logger = logging.getLogger(__name__)


class FaqResult(BaseModel):
    id: str
    question: str
    answer: str
    category: str


def _to_result(entry) -> dict:
    return FaqResult(id=entry.id, question=entry.question, answer=entry.answer,
                     category=entry.category).model_dump()


def build_faq_tools(router: FaqRouter) -> list:
    """Create the FAQ tool set bound to `router` (and whatever knowledge base it holds at call time)."""

    @tool
    def search_faq(query: str, max_results: int = KNOWLEDGE_BASE_CONFIG["search_max_results"]) -> dict:
        """Search the FAQ database for answers to the user's question. Always call this first for questions."""
        logger.info(f"🔧 [FAQ Tool] Searching FAQ database for '{query}'")
        knowledge_base = router.knowledge_base
        try:
            results = knowledge_base.search(query, max_results)
        except Exception as e:
            logger.error(f"❌ [FAQ Tool] Error during FAQ search: {e}")
            return {
                "results": [],
                "has_results": False,
                "search_query": query,
                "default_response": fmt.format_error_response()
            }

        if not results:
            logger.info("📝 [FAQ Tool] No FAQ matches found, returning default response")
            return {
                "results": [],
                "has_results": False,
                "search_query": query,
                "default_response": knowledge_base.default_response
            }

        logger.info(f"✅ [FAQ Tool] Found {len(results)} FAQ results")
        return {
            "results": [_to_result(entry) for entry in results],
            "has_results": True,
            "search_query": query
        }

    @tool
    def get_faq_categories() -> dict:
        """Get all available FAQ categories to show the user which topics are covered."""
        categories = router.knowledge_base.list_categories()
        logger.info(f"✅ [Categories Tool] Retrieved categories: {categories}")
        return {"categories": categories}

    @tool
    def get_category_faqs(category: str) -> dict:
        """Get every FAQ item from one category (case-insensitive)."""
        items = router.knowledge_base.by_category(category)
        logger.info(f"✅ [Category FAQs Tool] {len(items)} items for '{category}'")
        return {"items": [_to_result(entry) for entry in items], "category": category}

    @tool
    def format_faq_response(results: List[FaqResult], has_results: bool, search_query: str,
                            default_response: Optional[str] = None) -> dict:
        """Format search_faq results as the chat reply. Must be called with the output of search_faq."""
        logger.info(f"🔧 [Format Tool] Formatting {len(results)} results for '{search_query}'")
        if not has_results or not results:
            return {
                "formatted_message": default_response or STATIC_RESPONSES["default"],
                "message_type": "default_response"
            }

        entries = [FaqResult.model_validate(result) for result in results]
        return {
            "formatted_message": fmt.format_search_results(entries),
            "message_type": "faq_results"
        }

    @tool
    def format_help_response(categories: List[str]) -> dict:
        """Format the help menu from the output of get_faq_categories."""
        return {"formatted_message": fmt.format_help_response(categories), "message_type": "help"}

    @tool
    async def route_faq_request(message: str, chat_id: str) -> dict:
        """Route a raw chat message deterministically (help, news, category or search) and return the reply."""
        routed = await router.route(message, chat_id)
        return routed.model_dump()

    return [
        search_faq,
        get_faq_categories,
        get_category_faqs,
        format_faq_response,
        format_help_response,
        route_faq_request
    ]
