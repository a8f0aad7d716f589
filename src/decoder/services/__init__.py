"""Serviços do decodificador."""

from decoder.services.response_decoder import (
    WebhookResponseDecoder,
    decode_webhook_response,
)

__all__ = [
    "WebhookResponseDecoder",
    "decode_webhook_response",
]
