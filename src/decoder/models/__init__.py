"""Modelos (DTOs) do decodificador de respostas do webhook."""

from decoder.models.webhook_response import (
    DecodedShape,
    DecodeResult,
    FailureKind,
    ShapeKind,
    StageFailure,
    StageName,
    StageResult,
)

__all__ = [
    "DecodeResult",
    "DecodedShape",
    "FailureKind",
    "ShapeKind",
    "StageFailure",
    "StageName",
    "StageResult",
]
