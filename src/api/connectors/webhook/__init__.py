"""Conector do webhook de chat."""

from api.connectors.webhook.chat_client import (
    ChatWebhookClient,
    create_chat_webhook_client,
)
from api.connectors.webhook.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.webhook.models import AudioData, WebhookPayload

__all__ = [
    "AudioData",
    "ChatWebhookClient",
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "WebhookPayload",
    "create_chat_webhook_client",
]
