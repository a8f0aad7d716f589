"""Cliente do webhook de chat do criador de conteúdo.

Envia a mensagem do usuário (texto ou áudio) e devolve a resposta já
decodificada pelo WebhookResponseDecoder.

Logging: apenas tamanhos, status e tipo de mensagem (sem conteúdo).
"""

from __future__ import annotations

import base64
import logging
import time
from typing import TYPE_CHECKING

from api.connectors.webhook.http_base import (
    HttpClient,
    HttpClientConfig,
    HttpError,
    raise_for_status,
)
from api.connectors.webhook.models import AudioData, WebhookPayload
from decoder.services.response_decoder import WebhookResponseDecoder

if TYPE_CHECKING:
    from config.settings import WebhookSettings

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_AUDIO_MIME_TYPE = "audio/webm;codecs=opus"


class ChatWebhookClient:
    """Chamadas ao webhook de chat.

    Args:
        url: Endpoint do webhook
        user_id: Identificador enviado em todo payload
        http_client: Cliente HTTP (padrão: HttpClient sem retries)
        decoder: Decodificador de respostas (padrão: WebhookResponseDecoder)
    """

    def __init__(
        self,
        url: str,
        user_id: str,
        http_client: HttpClient | None = None,
        decoder: WebhookResponseDecoder | None = None,
    ) -> None:
        self.url = url
        self.user_id = user_id
        self._http = http_client or HttpClient()
        self._decoder = decoder or WebhookResponseDecoder()

    async def send_text_message(self, message: str) -> str:
        """Envia mensagem de texto e retorna a resposta do assistente."""
        return await self.call_webhook(message)

    async def send_audio_message(
        self,
        audio: bytes,
        mime_type: str = DEFAULT_AUDIO_MIME_TYPE,
    ) -> str:
        """Envia gravação de áudio (codificada em base64) e retorna a resposta.

        Raises:
            ValueError: Se o áudio estiver vazio.
        """
        if not audio:
            raise ValueError("Áudio vazio")

        audio_data = AudioData(
            data=base64.b64encode(audio).decode("ascii"),
            type=mime_type,
        )
        return await self.call_webhook("", audio_data)

    async def call_webhook(self, message: str, audio: AudioData | None = None) -> str:
        """POST do payload e decodificação da resposta.

        Raises:
            HttpError: Resposta fora de 2xx ou falha de conexão
            DecodeError: Resposta sem conteúdo recuperável
        """
        payload = WebhookPayload.build(message, self.user_id, audio)
        started = time.perf_counter()

        try:
            response = await self._http.post(self.url, json=payload.to_dict())
            raise_for_status(response)
        except HttpError as exc:
            logger.warning(
                "chat_webhook_http_error",
                extra={
                    "status_code": exc.status_code,
                    "message_type": payload.message_type,
                    "elapsed_ms": _elapsed_ms(started),
                },
            )
            raise

        text = response.text
        logger.info(
            "chat_webhook_response_received",
            extra={
                "status_code": response.status_code,
                "message_type": payload.message_type,
                "payload_length": len(text),
                "elapsed_ms": _elapsed_ms(started),
            },
        )
        return self._decoder.decode(text).message


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 1)


def create_chat_webhook_client(
    settings: WebhookSettings | None = None,
) -> ChatWebhookClient:
    """Factory com config padrão.

    Args:
        settings: WebhookSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_webhook_settings

    webhook = settings or get_webhook_settings()
    config = HttpClientConfig(
        timeout_seconds=webhook.request_timeout_seconds,
        max_retries=webhook.max_retries,
    )
    return ChatWebhookClient(
        url=webhook.url,
        user_id=webhook.user_id,
        http_client=HttpClient(config),
    )
