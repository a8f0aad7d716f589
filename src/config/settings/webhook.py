"""Settings do webhook de chat do criador de conteúdo."""

from __future__ import annotations

import os
import uuid
from dataclasses import dataclass, field
from functools import lru_cache

DEFAULT_WEBHOOK_URL: str = "https://webhook.fernandabeppler.com.br/webhook/chat_ai"


def generate_user_id() -> str:
    """Gera identificador de usuário para a sessão de chat (ex: user_3f2a9c1b4)."""
    return f"user_{uuid.uuid4().hex[:9]}"


@dataclass(frozen=True)
class WebhookSettings:
    """Configurações do webhook de chat.

    Attributes:
        url: Endpoint que recebe o POST de cada mensagem
        user_id: Identificador enviado em todo payload
        request_timeout_seconds: Timeout para a chamada HTTP
        max_retries: Tentativas extras em 429/5xx/erro de conexão
        status_cooldown_seconds: Tempo até o status voltar a "online" após erro
        audio_status_cooldown_seconds: Idem, após erro no envio de áudio
    """

    url: str = DEFAULT_WEBHOOK_URL
    user_id: str = field(default_factory=generate_user_id)
    request_timeout_seconds: float = 30.0
    max_retries: int = 0
    status_cooldown_seconds: float = 10.0
    audio_status_cooldown_seconds: float = 5.0

    def validate(self) -> list[str]:
        """Valida configurações do webhook.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.url.startswith(("http://", "https://")):
            errors.append("CHAT_WEBHOOK_URL deve ser uma URL http(s)")

        if not self.user_id.strip():
            errors.append("CHAT_WEBHOOK_USER_ID não pode ser vazio")

        if self.request_timeout_seconds <= 0:
            errors.append("CHAT_WEBHOOK_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("CHAT_WEBHOOK_MAX_RETRIES deve ser >= 0")

        if self.status_cooldown_seconds < 0 or self.audio_status_cooldown_seconds < 0:
            errors.append("CHAT_STATUS_COOLDOWN_SECONDS deve ser >= 0")

        return errors


def _load_webhook_from_env() -> WebhookSettings:
    """Carrega WebhookSettings de variáveis de ambiente."""
    return WebhookSettings(
        url=os.getenv("CHAT_WEBHOOK_URL", DEFAULT_WEBHOOK_URL),
        user_id=os.getenv("CHAT_WEBHOOK_USER_ID") or generate_user_id(),
        request_timeout_seconds=float(os.getenv("CHAT_WEBHOOK_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("CHAT_WEBHOOK_MAX_RETRIES", "0")),
        status_cooldown_seconds=float(os.getenv("CHAT_STATUS_COOLDOWN_SECONDS", "10")),
        audio_status_cooldown_seconds=float(
            os.getenv("CHAT_AUDIO_STATUS_COOLDOWN_SECONDS", "5")
        ),
    )


@lru_cache(maxsize=1)
def get_webhook_settings() -> WebhookSettings:
    """Retorna instância cacheada de WebhookSettings."""
    return _load_webhook_from_env()
