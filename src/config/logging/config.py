"""Configuração do logging JSON do chat."""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from config.logging.filters import ContentRedactionFilter, CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "criador_conteudo_chat"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Instala um único handler JSON no logger raiz.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (sem diferenciar caixa).
        service_name: Valor do campo ``service``.
        correlation_id_getter: Ex: app.observability.get_correlation_id.
        stream: Destino do handler (padrão: stderr).

    Raises:
        ValueError: Nível desconhecido.
    """
    level_name = level.upper()
    if level_name not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(stream)
    handler.setLevel(level_name)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(ContentRedactionFilter())

    root = logging.getLogger()
    root.setLevel(level_name)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Registra um fallback acionado (nunca com o conteúdo do payload).

    Args:
        logger: Logger de destino.
        component: Ex: "webhook_decoder.strict".
        reason: Ex: "malformed_input".
        elapsed_ms: Duração da etapa que falhou.
    """
    extra: dict[str, object] = {"fallback_used": True, "component": component}
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms
    logger.info("Fallback applied for %s", component, extra=extra)
