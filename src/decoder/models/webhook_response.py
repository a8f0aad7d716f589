"""Contratos do decodificador de respostas do webhook de chat.

Define os formatos de envelope reconhecidos, o resultado de cada estágio
do pipeline e o resultado final entregue ao chamador.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ShapeKind(Enum):
    """Envelopes de resposta usados pelo webhook ao longo das versões."""

    ARRAY_OUTPUT = "array_output"  # [{"output": "..."}]
    SUCCESS_ENVELOPE = "success_envelope"  # {"success": true, "data": {"response": "..."}}
    DATA_RESPONSE = "data_response"  # {"data": {"response": "..."}}
    DIRECT_OUTPUT = "direct_output"  # {"output": "..."}
    DIRECT_RESPONSE = "direct_response"  # {"response": "..."}
    DIRECT_MESSAGE = "direct_message"  # {"message": "..."}


class StageName(Enum):
    """Estágios do pipeline, na ordem de execução."""

    STRICT = "strict"
    SANITIZED = "sanitized"
    FIELD_SCAN = "field_scan"
    EMERGENCY = "emergency"


class FailureKind(Enum):
    """Tipos de falha recuperável de um estágio."""

    MALFORMED_INPUT = "malformed_input"  # nenhuma estrutura parseável
    FIELD_NOT_FOUND = "field_not_found"  # estrutura sem campo reconhecido
    EMPTY_CONTENT = "empty_content"  # campo encontrado, texto vazio


@dataclass(frozen=True, slots=True)
class DecodedShape:
    """Formato selecionado e o valor bruto do campo de resposta."""

    kind: ShapeKind
    value: Any


@dataclass(frozen=True, slots=True)
class StageFailure:
    """Falha local de um estágio (convertida em "tentar o próximo")."""

    stage: StageName
    kind: FailureKind
    reason: str = ""


@dataclass(frozen=True, slots=True)
class StageResult:
    """Resultado de um estágio: árvore candidata ou falha.

    Atributos:
        stage: Estágio que produziu o resultado
        tree: Árvore genérica (dict/list) quando o estágio teve sucesso
        failure: Motivo da falha quando não houve candidato
    """

    stage: StageName
    tree: Any = None
    failure: StageFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, stage: StageName, tree: Any) -> StageResult:
        return cls(stage=stage, tree=tree)

    @classmethod
    def fail(cls, stage: StageName, kind: FailureKind, reason: str = "") -> StageResult:
        return cls(stage=stage, failure=StageFailure(stage, kind, reason))


@dataclass(frozen=True, slots=True)
class DecodeResult:
    """Resposta final decodificada.

    Atributos:
        message: Texto pós-processado, pronto para exibição
        shape: Formato do envelope selecionado pelo resolver
        stage: Estágio que produziu o candidato vencedor
        failures: Falhas dos estágios anteriores (diagnóstico)
    """

    message: str
    shape: ShapeKind
    stage: StageName
    failures: tuple[StageFailure, ...] = ()
