"""Extração de emergência: último recurso do pipeline.

Remove o andaime JSON óbvio e tenta recuperar o maior trecho plausível de
linguagem natural. Só é usada quando todos os outros estágios falharam.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from re import Pattern
from typing import Final

from decoder.utils.field_scanner import unescape_json_string

logger = logging.getLogger(__name__)

_ENVELOPE_PREFIX: Final[Pattern[str]] = re.compile(
    r'^\s*[\[{].*?"(output|response)"\s*:\s*"', re.IGNORECASE
)
_ENVELOPE_SUFFIX: Final[Pattern[str]] = re.compile(r'"\s*[}\]](?:\s*[}\]])*\s*\Z')

# Trecho final que começa com maiúscula e não tem chaves, colchetes ou aspas
_TRAILING_PROSE: Final[Pattern[str]] = re.compile(r'[A-Z][^"{}\[\]]*\Z')

_EMBEDDED_JSON_MARKERS: Final[tuple[str, ...]] = ('{"', "[{")


@lru_cache(maxsize=8)
def _text_run_pattern(min_run: int) -> Pattern[str]:
    return re.compile(rf'[A-Za-z][^"{{}}\[\]]{{{min_run},}}')


def longest_text_run(raw: str, min_run: int = 100) -> str | None:
    """Retorna o maior trecho de texto livre (sem ``{}[]"``) do payload.

    Em caso de empate vence o primeiro trecho encontrado.

    Args:
        raw: Payload bruto
        min_run: Caracteres exigidos após a letra inicial

    Returns:
        Trecho aparado ou None se nenhum tiver o tamanho mínimo
    """
    matches = _text_run_pattern(min_run).findall(raw)
    if not matches:
        return None
    return max(matches, key=len).strip() or None


def _looks_like_json(text: str) -> bool:
    return any(marker in text for marker in _EMBEDDED_JSON_MARKERS)


def extract_emergency(
    raw: str,
    min_length: int = 50,
    text_run_length: int = 100,
) -> str | None:
    """Recupera conteúdo de um payload que nenhum parser aceitou.

    1. remove prefixo ``[{..."output":"`` / ``{..."response":"`` e o fechamento
    2. resolve escapes
    3. se ainda houver JSON residual, fica com o trecho final em prosa
    4. aceita se tiver mais de ``min_length`` caracteres e nenhum ``{"``/``[{``
    5. senão, devolve o maior trecho de texto livre do payload original

    Returns:
        Texto recuperado ou None
    """
    content = _ENVELOPE_PREFIX.sub("", raw, count=1)
    content = _ENVELOPE_SUFFIX.sub("", content, count=1)
    content = unescape_json_string(content).strip()

    if '"' in content and "{" in content:
        prose = _TRAILING_PROSE.search(content)
        if prose:
            content = prose.group(0).strip()

    if len(content) > min_length and not _looks_like_json(content):
        logger.debug("emergency_extraction_content", extra={"length": len(content)})
        return content

    longest = longest_text_run(raw, text_run_length)
    if longest:
        logger.debug("emergency_extraction_longest_run", extra={"length": len(longest)})
    return longest
