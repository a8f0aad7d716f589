"""Pós-processamento do texto de resposta do webhook.

Responsabilidade:
- Remover marcadores de protocolo ([AUDIO] no início, [FIGURINHAS] no fim)
- Remover caracteres de controle que quebram a renderização
- Preservar TAB, LF e CR (quebras de linha chegam intactas à UI)

Markdown não é tocado aqui; a conversão é feita pela camada de exibição.
"""

from __future__ import annotations

import re
from re import Pattern
from typing import Any, Final

from decoder.config.settings import EMPTY_RESPONSE_TEXT

# C0 (exceto TAB, LF, CR), DEL e C1
CONTROL_CHARS: Final[Pattern[str]] = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")

_AUDIO_MARKER: Final[Pattern[str]] = re.compile(r"^\[AUDIO\]\s*", re.IGNORECASE)
_STICKERS_MARKER: Final[Pattern[str]] = re.compile(r"\s*\[FIGURINHAS\]\Z", re.IGNORECASE)


def strip_control_chars(text: str) -> str:
    """Remove caracteres de controle, preservando TAB, LF e CR.

    Exemplos:
        >>> strip_control_chars("Olá\\x00 mundo\\n")
        'Olá mundo\\n'
    """
    return CONTROL_CHARS.sub("", text)


def process_response_message(message: Any, empty_text: str = EMPTY_RESPONSE_TEXT) -> str:
    """Converte o valor selecionado pelo resolver na mensagem final.

    Valores ausentes ou que não são string viram ``empty_text``. Para strings,
    remove controles e marcadores e apara espaços nas bordas. A operação é
    idempotente: aplicar duas vezes dá o mesmo resultado.

    Args:
        message: Valor bruto do campo de resposta
        empty_text: Texto exibido quando não há string utilizável

    Returns:
        Mensagem pronta para exibição

    Exemplos:
        >>> process_response_message("[AUDIO] Oi, tudo bem? [FIGURINHAS]")
        'Oi, tudo bem?'

        >>> process_response_message(None)
        'Resposta vazia'
    """
    if not message or not isinstance(message, str):
        return empty_text

    result = strip_control_chars(message)
    result = _AUDIO_MARKER.sub("", result, count=1)
    result = _STICKERS_MARKER.sub("", result, count=1)
    return result.strip()
