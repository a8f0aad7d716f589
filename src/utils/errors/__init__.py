"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    DecodeError,
    UnrecognizedShapeError,
    UnrecoverablePayloadError,
)

__all__ = [
    "DecodeError",
    "UnrecognizedShapeError",
    "UnrecoverablePayloadError",
]
