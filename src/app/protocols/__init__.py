"""Protocolos e contratos do core da aplicação."""

from .chat_client import ChatWebhookClientProtocol

__all__ = [
    "ChatWebhookClientProtocol",
]
