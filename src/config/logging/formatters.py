"""Formatter JSON dos logs do chat."""

from __future__ import annotations

from typing import Final

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS: Final[frozenset[str]] = frozenset(
    {"asctime", "levelname", "name", "message", "correlation_id", "service"}
)

FIELD_RENAME_MAP: Final[dict[str, str]] = {"levelname": "level", "name": "logger"}

ISO_DATE_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S"


def create_json_formatter() -> JsonFormatter:
    """Formatter com os campos obrigatórios, data ISO e acentos legíveis.

    Exemplo:
        {"asctime": "2026-10-19T14:02:11", "correlation_id": "abc-123",
         "level": "INFO", "logger": "decoder.services.response_decoder",
         "message": "Fallback applied for webhook_decoder.strict",
         "service": "criador_conteudo_chat", "fallback_used": true,
         "component": "webhook_decoder.strict", "reason": "malformed_input",
         "elapsed_ms": 0.041}
    """
    fields = " ".join(f"%({name})s" for name in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(
        fields,
        datefmt=ISO_DATE_FORMAT,
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
