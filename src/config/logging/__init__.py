"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app.bootstrap)
    configure_logging(level="INFO", service_name="criador_conteudo_chat")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("webhook_call_finished", extra={"latency_ms": 42})

Campos obrigatórios em todo log: correlation_id, service, level, logger,
message, asctime. Nunca registrar o texto das mensagens do chat.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CONTENT_FIELDS, ContentRedactionFilter, CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "CONTENT_FIELDS",
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "ContentRedactionFilter",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
