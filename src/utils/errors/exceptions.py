"""Exceções de domínio para falhas de decodificação e transporte do webhook."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decoder.models.webhook_response import StageFailure


class DecodeError(ValueError):
    """Base para falhas terminais ao decodificar a resposta do webhook.

    Atributos:
        payload_length: Tamanho do payload recebido (nunca o conteúdo)
        failures: Falhas de cada estágio tentado, na ordem de execução
    """

    default_message = "Falha ao decodificar resposta do servidor"

    def __init__(
        self,
        message: str | None = None,
        *,
        payload_length: int = 0,
        failures: tuple[StageFailure, ...] = (),
    ) -> None:
        super().__init__(message or self.default_message)
        self.payload_length = payload_length
        self.failures = failures


class UnrecoverablePayloadError(DecodeError):
    """Nenhum estágio conseguiu extrair conteúdo do payload."""

    default_message = "Não foi possível processar a resposta do servidor"


class UnrecognizedShapeError(DecodeError):
    """Estrutura parseada, mas em nenhum formato de resposta conhecido."""

    default_message = "Formato de resposta não reconhecido"
