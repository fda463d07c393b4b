"""
FAQ Agent Orchestrator
Runs the FAQ tools in a fixed, mandatory order. The LLM only decides whether a
message is a help request or a question; reply text always comes from tools.

MANDATORY WORKFLOW:
    HELP     -> get_faq_categories -> format_help_response
    QUESTION -> search_faq         -> format_faq_response
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional

import httpx

import response_formatters as fmt
from config import AGENT_CONFIG, REQUEST_CLASSIFICATION_PROMPT
from intent.intent_rules import detect_help, normalize_message
from intent.router import FaqRouter
from ollama_client.ollama_client import OllamaClient
from tools.faq_tools import build_faq_tools

logger = logging.getLogger(__name__)

REQUEST_TYPES = ["HELP", "QUESTION"]


class ToolSequenceError(RuntimeError):
    """Raised when the executed tools differ from the mandatory sequence."""


@dataclass
class AgentResult:
    response_text: str
    request_type: str
    tool_calls: List[str] = field(default_factory=list)


def fallback_request_classification(message: str) -> str:
    """Keyword classification used when the LLM is disabled or unavailable."""
    return "HELP" if detect_help(normalize_message(message)) else "QUESTION"


def _extract_request_type(raw_response: Optional[str]) -> Optional[str]:
    if not raw_response:
        return None
    detected = raw_response.strip().upper()
    if detected in REQUEST_TYPES:
        return detected
    # LLM added extra text
    for request_type in REQUEST_TYPES:
        if request_type in detected:
            return request_type
    return None


class FaqAgent:
    def __init__(self, router: FaqRouter, ollama_client: Optional[OllamaClient] = None,
                 use_llm: Optional[bool] = None):
        if use_llm is None:
            use_llm = AGENT_CONFIG["enabled"] or ollama_client is not None
        self.tools = {faq_tool.name: faq_tool for faq_tool in build_faq_tools(router)}
        self.ollama_client = (ollama_client or OllamaClient()) if use_llm else None

    async def classify_request(self, message: str) -> str:
        if self.ollama_client is None:
            return fallback_request_classification(message)

        max_retries = AGENT_CONFIG["max_retries"]
        retry_delay = AGENT_CONFIG["retry_delay"]

        for attempt in range(max_retries):
            try:
                raw_response = await self.ollama_client.generate(
                    REQUEST_CLASSIFICATION_PROMPT.format(message=message)
                )
            except httpx.TransportError as e:
                logger.error(f"❌ [FAQ Agent] Attempt {attempt + 1}/{max_retries} failed: {type(e).__name__}: {e}")
                if attempt < max_retries - 1:
                    await asyncio.sleep(retry_delay)
                    retry_delay *= 2  # Exponential backoff
                continue

            request_type = _extract_request_type(raw_response)
            if request_type:
                logger.info(f"🎯 [FAQ Agent] LLM classified request as {request_type}")
                return request_type

            logger.warning(f"⚠️ [FAQ Agent] Invalid classification from LLM: '{raw_response}'")
            break

        logger.info("🔤 [FAQ Agent] Falling back to keyword classification")
        return fallback_request_classification(message)

    async def _call(self, tool_calls: List[str], name: str, arguments: dict) -> dict:
        tool_calls.append(name)
        logger.info(f"🔧 [FAQ Agent] Calling tool {name}")
        return await self.tools[name].ainvoke(arguments)

    async def respond(self, message: str) -> AgentResult:
        tool_calls: List[str] = []
        request_type = "QUESTION"

        try:
            request_type = await self.classify_request(message)

            if request_type == "HELP":
                categories = await self._call(tool_calls, "get_faq_categories", {})
                formatted = await self._call(tool_calls, "format_help_response",
                                             {"categories": categories["categories"]})
            else:
                search_results = await self._call(tool_calls, "search_faq", {"query": message})
                formatted = await self._call(tool_calls, "format_faq_response", search_results)

            required = AGENT_CONFIG["required_sequences"][request_type]
            if tool_calls != required:
                raise ToolSequenceError(f"Expected tool sequence {required}, got {tool_calls}")

            return AgentResult(formatted["formatted_message"], request_type, tool_calls)

        except Exception as e:
            logger.error(f"❌ [FAQ Agent] Error answering message: {type(e).__name__}: {e}")
            return AgentResult(fmt.format_error_response(), request_type, tool_calls)
