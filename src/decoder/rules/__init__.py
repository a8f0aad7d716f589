"""Regras determinísticas do decodificador."""

from decoder.rules.shape_resolver import (
    SHAPE_PRECEDENCE,
    resolve_shape,
    wrap_output,
    wrap_response,
)

__all__ = [
    "SHAPE_PRECEDENCE",
    "resolve_shape",
    "wrap_output",
    "wrap_response",
]
