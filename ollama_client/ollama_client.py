"""
Ollama client for request-type classification
"""

import logging
from typing import Optional

import httpx

from config import OLLAMA_CONFIG

logger = logging.getLogger(__name__)


class OllamaClient:
    """
    Client for communicating with Ollama API
    """

    def __init__(self, base_url: Optional[str] = None, model: Optional[str] = None,
                 timeout: Optional[float] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url or OLLAMA_CONFIG["base_url"]
        self.model = model or OLLAMA_CONFIG["model"]
        self.timeout = timeout if timeout is not None else OLLAMA_CONFIG["timeout"]
        self.transport = transport

    async def generate(self, prompt: str) -> Optional[str]:
        """
        Send a prompt to Ollama

        Args:
            prompt: The formatted prompt to send to Ollama

        Returns:
            Optional[str]: The raw response from Ollama, or None on a non-200 status.
            Connection errors are raised so callers can retry.
        """
        logger.info(f"🤖 [Ollama] Sending prompt ({len(prompt)} chars) to {self.base_url} model={self.model}")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(
                f"{self.base_url}/api/generate",
                json={
                    "model": self.model,
                    "prompt": prompt,
                    "stream": False
                }
            )

        if response.status_code != 200:
            logger.error(f"❌ [Ollama] Request failed with status {response.status_code}: {response.text[:200]}")
            return None

        raw_response = response.json().get("response", "")
        logger.info(f"✅ [Ollama] Raw response: '{raw_response}'")
        return raw_response

    async def health_check(self) -> bool:
        """
        Check if Ollama is available and responding
        """
        try:
            async with httpx.AsyncClient(timeout=5.0, transport=self.transport) as client:
                response = await client.get(f"{self.base_url}/api/tags")
                return response.status_code == 200
        except Exception:
            return False

    def get_config(self) -> dict:
        return {
            "base_url": self.base_url,
            "model": self.model,
            "timeout": self.timeout
        }
