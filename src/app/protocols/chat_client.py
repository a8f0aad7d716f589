"""Contrato do cliente de chat usado pelos use cases.

Evita dependência direta do conector HTTP.
"""

from __future__ import annotations

from typing import Protocol


class ChatWebhookClientProtocol(Protocol):
    """Contrato mínimo para envio de mensagens ao webhook de chat."""

    async def send_text_message(self, message: str) -> str: ...

    async def send_audio_message(self, audio: bytes, mime_type: str) -> str: ...
