"""
Inbound message handling
Filters transport events, routes chat text through the FAQ router and sends
the reply through the transport passed in by the caller
"""

import logging
from typing import Optional, Protocol

from pydantic import BaseModel

from config import TRANSPORT_CONFIG
from intent.router import FaqRouter, RouteResponse

logger = logging.getLogger(__name__)


class InboundMessage(BaseModel):
    chat_id: str
    body: str = ""
    from_me: bool = False
    message_type: str = "chat"


class SendResult(BaseModel):
    success: bool
    chat_id: str
    message_id: Optional[str] = None
    error: Optional[str] = None


class Transport(Protocol):
    async def send_message(self, chat_id: str, text: str) -> SendResult:
        ...


def should_handle(message: InboundMessage) -> bool:
    if message.chat_id in TRANSPORT_CONFIG["ignored_senders"] or message.from_me:
        return False
    if message.message_type != "chat":
        logger.info(f"📝 [Message Handler] Skipping non-text message type={message.message_type}")
        return False
    if not message.body.strip():
        logger.info("📝 [Message Handler] Skipping empty message")
        return False
    return True


async def handle_incoming_message(router: FaqRouter, transport: Transport,
                                  message: InboundMessage) -> Optional[RouteResponse]:
    """
    Route one inbound message and send the reply once.

    Returns:
        The routed response, or None when the message was skipped.
        Send failures are logged; retrying is the transport's concern.
    """
    if not should_handle(message):
        return None

    routed = await router.route(message.body, message.chat_id)
    logger.info(f"📝 [Message Handler] Routed chat={message.chat_id} type={routed.response_type}")

    try:
        result = await transport.send_message(message.chat_id, routed.response_text)
    except Exception as e:
        logger.error(f"❌ [Message Handler] Transport raised while sending to {message.chat_id}: {e}")
        return routed

    if result.success:
        logger.info(f"✅ [Message Handler] Reply sent to {result.chat_id}")
    else:
        logger.error(f"❌ [Message Handler] Reply to {message.chat_id} failed: {result.error}")
    return routed
