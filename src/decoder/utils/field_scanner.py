"""Varredura de campos sem parse estrutural completo.

Localiza ``"<campo>":`` no texto bruto e lê o valor string caractere a
caractere. Aspas não escapadas dentro do valor são comuns nas respostas do
webhook; por isso uma aspa só fecha o valor quando o próximo caractere não
branco é ``}`` ou ``]``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from re import Pattern
from typing import Final

from decoder.config.settings import DEFAULT_MARKER_NAMES

logger = logging.getLogger(__name__)

_CONTAINER_CLOSERS: Final[frozenset[str]] = frozenset("}]")

_ESCAPE_SEQUENCE: Final[Pattern[str]] = re.compile(r'\\(["nrt\\])')
_UNESCAPED: Final[dict[str, str]] = {
    '"': '"',
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
}


class ScanState(Enum):
    """Estados da varredura de uma string JSON."""

    NORMAL = "normal"
    ESCAPED = "escaped"  # caractere anterior foi uma barra não escapada
    POSSIBLE_END = "possible_end"  # aspa vista; aguardando } ou ]


@dataclass(frozen=True, slots=True)
class ScannedField:
    """Valor extraído pela varredura.

    Atributos:
        marker: Campo onde o valor foi encontrado ("response" ou "output")
        text: Valor com sequências de escape resolvidas
        terminated: False quando o payload acabou antes do fechamento
    """

    marker: str
    text: str
    terminated: bool


def unescape_json_string(text: str) -> str:
    """Resolve os escapes ``\\"``, ``\\n``, ``\\r``, ``\\t`` e ``\\\\``.

    Exemplos:
        >>> unescape_json_string('Linha 1\\\\nLinha \\\\"2\\\\"')
        'Linha 1\\nLinha "2"'
    """
    return _ESCAPE_SEQUENCE.sub(lambda m: _UNESCAPED[m.group(1)], text)


def scan_string_value(text: str, start: int) -> tuple[str, bool]:
    """Lê um valor string a partir de ``start`` (logo após a aspa de abertura).

    Sequências de escape são mantidas no buffer. Se o payload terminar antes
    de um fechamento válido, devolve o que foi lido até ali.

    Returns:
        (conteúdo bruto, encontrou_fechamento)
    """
    buffer: list[str] = []
    pending: list[str] = []  # aspa candidata + brancos seguintes
    state = ScanState.NORMAL

    for index in range(start, len(text)):
        char = text[index]

        if state is ScanState.POSSIBLE_END:
            if char in _CONTAINER_CLOSERS:
                return "".join(buffer), True
            if char.isspace():
                pending.append(char)
                continue
            # aspa interna: faz parte do conteúdo
            buffer.extend(pending)
            pending.clear()
            state = ScanState.NORMAL

        if state is ScanState.ESCAPED:
            buffer.append(char)
            state = ScanState.NORMAL
        elif char == "\\":
            buffer.append(char)
            state = ScanState.ESCAPED
        elif char == '"':
            pending.append(char)
            state = ScanState.POSSIBLE_END
        else:
            buffer.append(char)

    buffer.extend(pending)
    return "".join(buffer), False


def scan_field(
    raw: str,
    marker_names: tuple[str, ...] = DEFAULT_MARKER_NAMES,
    min_length: int = 100,
) -> ScannedField | None:
    """Procura o primeiro campo com valor longo o suficiente.

    Campos são testados na ordem de ``marker_names``; o primeiro com mais
    de ``min_length`` caracteres (antes de resolver escapes) vence.
    Valores curtos são tratados como ruído.

    Args:
        raw: Payload bruto
        marker_names: Nomes de campo em ordem de precedência
        min_length: Tamanho mínimo exclusivo do valor

    Returns:
        ScannedField ou None se nenhum campo qualificar
    """
    for marker in marker_names:
        token = f'"{marker}":'
        marker_index = raw.find(token)
        if marker_index == -1:
            continue

        quote_start = raw.find('"', marker_index + len(token))
        if quote_start == -1:
            continue

        content, terminated = scan_string_value(raw, quote_start + 1)
        if len(content) <= min_length:
            logger.debug(
                "field_scan_value_too_short",
                extra={"marker": marker, "length": len(content)},
            )
            continue

        return ScannedField(
            marker=marker,
            text=unescape_json_string(content),
            terminated=terminated,
        )

    return None
