"""Decodificadores estruturados (estrito e com saneamento).

O webhook às vezes envia bytes de controle crus dentro de strings JSON,
o que quebra parsers estritos. A limpeza substitui esses caracteres às
cegas para restaurar a validade sintática no caso comum.
"""

from __future__ import annotations

import json
import logging
import re
from re import Pattern
from typing import Final

from decoder.models.webhook_response import FailureKind, StageName, StageResult
from decoder.utils.sanitizer import CONTROL_CHARS

logger = logging.getLogger(__name__)

_BOM: Final[str] = "\ufeff"

_CONTROL_ESCAPES: Final[dict[str, str]] = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_LINE_BREAK: Final[Pattern[str]] = re.compile(r"\r\n|\r")
_HORIZONTAL_SPACE: Final[Pattern[str]] = re.compile(r"[ \t]+")
_BLANK_LINES: Final[Pattern[str]] = re.compile(r"\n\s*\n")


def decode_strict(raw: str) -> StageResult:
    """Parse JSON do payload exatamente como recebido."""
    try:
        return StageResult.success(StageName.STRICT, json.loads(raw))
    except json.JSONDecodeError as e:
        return StageResult.fail(StageName.STRICT, FailureKind.MALFORMED_INPUT, e.msg)


def decode_sanitized(raw: str) -> StageResult:
    """Limpa o payload e tenta o parse JSON novamente."""
    cleaned = clean_json_string(raw)
    if not cleaned:
        return StageResult.fail(StageName.SANITIZED, FailureKind.MALFORMED_INPUT, "empty")

    try:
        return StageResult.success(StageName.SANITIZED, json.loads(cleaned))
    except json.JSONDecodeError as e:
        return StageResult.fail(StageName.SANITIZED, FailureKind.MALFORMED_INPUT, e.msg)


def clean_json_string(raw: str) -> str:
    """Normaliza caracteres de controle e quebras de linha do payload.

    Ordem das transformações:
    1. remove BOM inicial e bytes NUL
    2. troca controles por escape (LF, CR, TAB) ou espaço (demais)
    3. converte CRLF e CR isolado em ``\\n`` escapado
    4. colapsa espaços horizontais e linhas em branco

    Args:
        raw: Payload bruto

    Returns:
        Texto limpo, sem espaços nas bordas
    """
    cleaned = raw.removeprefix(_BOM).replace("\0", "")

    replaced = 0

    def _replace_control(match: re.Match[str]) -> str:
        nonlocal replaced
        replaced += 1
        char = match.group(0)
        return _CONTROL_ESCAPES.get(char, " ")

    cleaned = CONTROL_CHARS.sub(_replace_control, cleaned)
    cleaned = _LINE_BREAK.sub(r"\\n", cleaned)
    cleaned = _HORIZONTAL_SPACE.sub(" ", cleaned)
    cleaned = _BLANK_LINES.sub("\n", cleaned)
    cleaned = cleaned.strip()

    if replaced:
        logger.debug(
            "webhook_payload_control_chars_replaced",
            extra={"count": replaced, "original_length": len(raw), "cleaned_length": len(cleaned)},
        )
    return cleaned
