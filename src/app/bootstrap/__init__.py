"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e conecta o cliente
do webhook ao use case de chat.

Uso:
    from app.bootstrap import create_send_chat_message_use_case, initialize_app

    initialize_app()
    chat = create_send_chat_message_use_case()
    await chat.send_text("Quero ideias de roteiro para o meu canal")
"""

from __future__ import annotations

import logging
import os

from api.connectors.webhook import create_chat_webhook_client
from app.observability import get_correlation_id
from app.use_cases.chat import SendChatMessageUseCase
from config.logging import configure_logging
from config.settings import WebhookSettings, get_webhook_settings
from decoder.config import get_decoder_settings

SERVICE_NAME = "criador_conteudo_chat"

DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id e valida settings.

    Deve ser chamada uma vez no início do serviço.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )
    validate_runtime_settings()


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` apenas registra o alerta.
    """
    environment = os.getenv("ENVIRONMENT", "development").lower()
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"webhook: {error}" for error in get_webhook_settings().validate())
    errors.extend(f"decoder: {error}" for error in get_decoder_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


def create_send_chat_message_use_case(
    settings: WebhookSettings | None = None,
) -> SendChatMessageUseCase:
    """Cria o use case de chat com o cliente do webhook configurado."""
    webhook = settings or get_webhook_settings()
    return SendChatMessageUseCase(
        client=create_chat_webhook_client(webhook),
        status_cooldown_seconds=webhook.status_cooldown_seconds,
        audio_status_cooldown_seconds=webhook.audio_status_cooldown_seconds,
    )
