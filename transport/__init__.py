"""
Transport module for the FAQ Router Bot
Contains inbound message handling and the outbound webhook transport
"""

from .message_handler import InboundMessage, SendResult, Transport, handle_incoming_message
from .webhook_transport import WebhookTransport, format_chat_id

__all__ = [
    'InboundMessage',
    'SendResult',
    'Transport',
    'handle_incoming_message',
    'WebhookTransport',
    'format_chat_id'
]
