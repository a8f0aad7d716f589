"""Decodificador resiliente de respostas do webhook de chat.

Uso:
    from decoder import decode_webhook_response

    message = decode_webhook_response(payload_text)
"""

from decoder.models import DecodeResult, ShapeKind, StageName
from decoder.services import WebhookResponseDecoder, decode_webhook_response

__all__ = [
    "DecodeResult",
    "ShapeKind",
    "StageName",
    "WebhookResponseDecoder",
    "decode_webhook_response",
]
