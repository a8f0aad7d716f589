"""Configuração do decodificador."""

from decoder.config.settings import (
    DEFAULT_MARKER_NAMES,
    EMPTY_RESPONSE_TEXT,
    DecoderSettings,
    get_decoder_settings,
)

__all__ = [
    "DEFAULT_MARKER_NAMES",
    "EMPTY_RESPONSE_TEXT",
    "DecoderSettings",
    "get_decoder_settings",
]
