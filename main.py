"""
FAQ Router Bot API
Deterministic FAQ answers for chat transports, plus the optional tool-driven agent
"""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from agents.faq_agent import FaqAgent
from config import API_CONFIG, KNOWLEDGE_BASE_CONFIG, LOGGING_CONFIG
from intent.router import FaqRouter, NewsProvider, RouteResponse
from knowledge.knowledge_base import KnowledgeBase, KnowledgeBaseError, load_knowledge_base
from news_client.news_client import NewsClient
from transport.message_handler import InboundMessage, Transport, handle_incoming_message
from transport.webhook_transport import WebhookTransport

logging.basicConfig(level=LOGGING_CONFIG["level"], format=LOGGING_CONFIG["format"])
logger = logging.getLogger(__name__)


class RouteRequest(BaseModel):
    message: str
    conversation_id: str = ""


class AgentRequest(BaseModel):
    message: str


def _entry_payload(entry) -> dict:
    return entry.model_dump(mode="json")


def create_app(knowledge_base: Optional[KnowledgeBase] = None,
               news_provider: Optional[NewsProvider] = None,
               transport: Optional[Transport] = None,
               agent: Optional[FaqAgent] = None) -> FastAPI:
    """Wire the router and its collaborators; anything not given comes from config."""
    if knowledge_base is None:
        knowledge_base = load_knowledge_base(KNOWLEDGE_BASE_CONFIG["path"])
    if news_provider is None:
        news_provider = NewsClient()
    if transport is None:
        transport = WebhookTransport()

    router = FaqRouter(knowledge_base, news_provider)
    if agent is None:
        agent = FaqAgent(router)

    app = FastAPI(
        title=API_CONFIG["title"],
        description=API_CONFIG["description"],
        version=API_CONFIG["version"]
    )
    app.state.router = router
    app.state.transport = transport
    app.state.agent = agent

    @app.get("/")
    async def root():
        """Root endpoint - health check"""
        return {"message": "FAQ Router Bot API is running!", "status": "healthy"}

    @app.get("/health")
    async def health_check():
        """Health check endpoint; collaborators without a health check report None"""
        kb = router.knowledge_base

        news_check = getattr(news_provider, "health_check", None)
        news_feed = await news_check() if news_check else None

        ollama_client = getattr(app.state.agent, "ollama_client", None)
        ollama = None
        if ollama_client is not None:
            ollama = {"reachable": await ollama_client.health_check(), **ollama_client.get_config()}

        return {
            "status": "healthy",
            "service": "faq-router-bot",
            "knowledge_base": {
                "name": kb.name,
                "version": kb.version,
                "entries": len(kb),
                "categories": len(kb.list_categories())
            },
            "dependencies": {
                "news_feed": news_feed,
                "ollama": ollama
            }
        }

    @app.post("/route", response_model=RouteResponse)
    async def route_message(request: RouteRequest):
        return await router.route(request.message, request.conversation_id)

    @app.get("/search")
    async def search(q: str, max_results: int = Query(KNOWLEDGE_BASE_CONFIG["search_max_results"], le=50)):
        results = router.knowledge_base.search(q, max_results)
        return {"query": q, "total_count": len(results), "results": [_entry_payload(e) for e in results]}

    @app.get("/categories")
    async def list_categories():
        return {"categories": router.knowledge_base.list_categories()}

    @app.get("/categories/{name}")
    async def category_entries(name: str):
        entries = router.knowledge_base.by_category(name)
        return {"category": name, "total_count": len(entries), "entries": [_entry_payload(e) for e in entries]}

    @app.post("/messages")
    async def inbound_message(message: InboundMessage):
        routed = await handle_incoming_message(router, app.state.transport, message)
        if routed is None:
            return {"handled": False}
        return {"handled": True, "response_type": routed.response_type, "response_text": routed.response_text}

    @app.post("/agent")
    async def agent_answer(request: AgentRequest):
        result = await app.state.agent.respond(request.message)
        return {
            "response_text": result.response_text,
            "request_type": result.request_type,
            "tool_calls": result.tool_calls
        }

    @app.post("/reload")
    async def reload_knowledge_base():
        try:
            new_base = load_knowledge_base(KNOWLEDGE_BASE_CONFIG["path"])
        except KnowledgeBaseError as e:
            logger.error(f"❌ [API] Reload failed, keeping current knowledge base: {e}")
            raise HTTPException(status_code=400, detail=str(e))

        router.reload(new_base)
        return {"status": "reloaded", "name": new_base.name, "version": new_base.version, "entries": len(new_base)}

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=API_CONFIG["host"], port=API_CONFIG["port"])
