"""Use case de um turno de chat com o assistente criador de conteúdo.

Adiciona a bolha do usuário, chama o webhook e adiciona a resposta. Em
caso de falha adiciona uma bolha de erro, marca o status como erro e o
devolve a "online" após o cool-down, sem deixar a conversa presa em
"processando".
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from api.connectors.webhook.http_base import HttpError
from app.observability import correlation_scope
from app.use_cases.chat.models import (
    AUDIO_ERROR_STATUS,
    ONLINE_STATUS,
    PROCESSING_AUDIO_STATUS,
    PROCESSING_TEXT_STATUS,
    TEXT_ERROR_STATUS,
    ChatMessage,
    ChatStatus,
    Sender,
)
from utils.errors import DecodeError

if TYPE_CHECKING:
    from app.protocols.chat_client import ChatWebhookClientProtocol

logger = logging.getLogger(__name__)

AUDIO_PLACEHOLDER_TEXT = "Mensagem de áudio"
INVALID_AUDIO_FILE_TEXT = "❌ Por favor, selecione apenas arquivos de áudio."


class SendChatMessageUseCase:
    """Mantém a conversa e o status e executa os turnos de chat.

    Args:
        client: Cliente do webhook (texto e áudio)
        status_cooldown_seconds: Espera até voltar a "online" após erro de texto
        audio_status_cooldown_seconds: Idem para erro de áudio
    """

    def __init__(
        self,
        client: ChatWebhookClientProtocol,
        status_cooldown_seconds: float = 10.0,
        audio_status_cooldown_seconds: float = 5.0,
    ) -> None:
        self._client = client
        self._text_cooldown = status_cooldown_seconds
        self._audio_cooldown = audio_status_cooldown_seconds
        self._messages: list[ChatMessage] = []
        self._status = ONLINE_STATUS
        self._restore_task: asyncio.Task[None] | None = None

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    @property
    def status(self) -> ChatStatus:
        return self._status

    @property
    def pending_restore(self) -> asyncio.Task[None] | None:
        """Task que devolverá o status a "online", se houver."""
        return self._restore_task

    async def send_text(self, text: str) -> ChatMessage | None:
        """Envia mensagem de texto. Entrada em branco é ignorada.

        Returns:
            Bolha adicionada como resposta (ai ou error), ou None
        """
        message = text.strip()
        if not message:
            return None

        self._add(message, Sender.USER)
        self._set_status(PROCESSING_TEXT_STATUS)

        with correlation_scope():
            try:
                reply = await self._client.send_text_message(message)
            except (DecodeError, HttpError) as exc:
                return self._fail(f"❌ Erro: {exc}", TEXT_ERROR_STATUS, self._text_cooldown, exc)

        self._set_status(ONLINE_STATUS)
        return self._add(reply, Sender.AI)

    async def send_audio(self, audio: bytes, mime_type: str) -> ChatMessage | None:
        """Envia gravação de áudio. Áudio vazio é ignorado.

        Returns:
            Bolha adicionada como resposta (ai ou error), ou None
        """
        if not audio:
            return None
        if not mime_type.startswith("audio/"):
            return self._add(INVALID_AUDIO_FILE_TEXT, Sender.ERROR)

        self._add(AUDIO_PLACEHOLDER_TEXT, Sender.USER, is_audio=True)
        self._set_status(PROCESSING_AUDIO_STATUS)

        with correlation_scope():
            try:
                reply = await self._client.send_audio_message(audio, mime_type)
            except (DecodeError, HttpError) as exc:
                return self._fail(
                    f"❌ Erro ao processar áudio: {exc}",
                    AUDIO_ERROR_STATUS,
                    self._audio_cooldown,
                    exc,
                )

        self._set_status(ONLINE_STATUS)
        return self._add(reply, Sender.AI)

    def _fail(
        self,
        bubble: str,
        status: ChatStatus,
        cooldown: float,
        exc: Exception,
    ) -> ChatMessage:
        logger.warning(
            "chat_turn_failed",
            extra={"error_type": type(exc).__name__, "cooldown_seconds": cooldown},
        )
        self._set_status(status)
        self._schedule_restore(cooldown)
        return self._add(bubble, Sender.ERROR)

    def _add(self, content: str, sender: Sender, is_audio: bool = False) -> ChatMessage:
        message = ChatMessage(
            id=len(self._messages) + 1,
            content=content,
            sender=sender,
            is_audio=is_audio,
        )
        self._messages.append(message)
        return message

    def _set_status(self, status: ChatStatus) -> None:
        if self._restore_task is not None and not self._restore_task.done():
            self._restore_task.cancel()
        self._restore_task = None
        self._status = status

    def _schedule_restore(self, delay: float) -> None:
        self._restore_task = asyncio.create_task(self._restore_online_after(delay))

    async def _restore_online_after(self, delay: float) -> None:
        await asyncio.sleep(delay)
        self._status = ONLINE_STATUS
