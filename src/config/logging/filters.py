"""Filters de logging do chat.

- CorrelationIdFilter: injeta service e correlation_id do turno atual
- ContentRedactionFilter: troca por tamanho qualquer texto de conversa
  que chegue aos logs via ``extra``
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable

# Campos de ``extra`` que carregariam texto do usuário ou do webhook
CONTENT_FIELDS: Final[frozenset[str]] = frozenset(
    {"payload", "raw", "reply", "content", "text", "audio"}
)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record.

    Args:
        service_name: Nome do serviço.
        correlation_id_getter: Retorna o correlation_id do turno de chat
            atual. Sem getter, o campo fica vazio.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._correlation_id_getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self._service_name
        if getattr(record, "correlation_id", None):
            return True
        getter = self._correlation_id_getter
        record.correlation_id = getter() if getter else ""
        return True


class ContentRedactionFilter(logging.Filter):
    """Substitui campos de conteúdo por ``<redacted len=N>``."""

    def filter(self, record: logging.LogRecord) -> bool:
        for name in CONTENT_FIELDS.intersection(record.__dict__):
            value = record.__dict__[name]
            size = len(value) if isinstance(value, (str, bytes)) else 0
            setattr(record, name, f"<redacted len={size}>")
        return True
