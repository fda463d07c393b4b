"""
Outbound transport that posts replies to a chat gateway webhook
"""

import logging
from typing import Optional

import httpx

from config import TRANSPORT_CONFIG
from .message_handler import SendResult

logger = logging.getLogger(__name__)


def format_chat_id(chat_id: str) -> str:
    """Bare phone numbers get the individual-chat suffix."""
    if '@' in chat_id:
        return chat_id
    return f"{chat_id}{TRANSPORT_CONFIG['chat_id_suffix']}"


class WebhookTransport:
    def __init__(self, outbound_url: Optional[str] = None, timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.outbound_url = outbound_url if outbound_url is not None else TRANSPORT_CONFIG["outbound_url"]
        self.timeout = timeout if timeout is not None else TRANSPORT_CONFIG["timeout"]
        self.transport = transport

    async def send_message(self, chat_id: str, text: str) -> SendResult:
        formatted_chat_id = format_chat_id(chat_id)

        if not self.outbound_url:
            return SendResult(success=False, chat_id=formatted_chat_id,
                              error="No outbound transport URL configured")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.outbound_url,
                    json={"chatId": formatted_chat_id, "message": text}
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"❌ [Webhook Transport] Send to {formatted_chat_id} failed: {type(e).__name__}: {e}")
            return SendResult(success=False, chat_id=formatted_chat_id, error=str(e) or type(e).__name__)

        message_id = None
        try:
            message_id = response.json().get("messageId")
        except (ValueError, AttributeError):
            pass

        return SendResult(success=True, chat_id=formatted_chat_id, message_id=message_id)
