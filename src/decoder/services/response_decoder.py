"""Decodificador resiliente de respostas do webhook de chat.

Pipeline de estágios em ordem fixa; cada um é fallback do anterior:

1. STRICT: parse JSON do payload como recebido
2. SANITIZED: limpeza de controles/quebras de linha e novo parse
3. FIELD_SCAN: varredura de ``"response":`` / ``"output":`` no texto bruto
4. EMERGENCY: heurística de recuperação de texto livre

O primeiro estágio cujo candidato resolve para um formato conhecido e
produz texto não vazio vence. Falhas intermediárias viram diagnóstico.
JSON válido que não casa com nenhum formato encerra o pipeline com
UnrecognizedShapeError; fora isso, só a exaustão de todos os estágios
levanta DecodeError.

Uso:
    decoder = WebhookResponseDecoder()
    result = decoder.decode(response.text)
    result.message  # texto pronto para exibição
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import NoReturn

from config.logging import log_fallback
from decoder.config.settings import DecoderSettings, get_decoder_settings
from decoder.models.webhook_response import (
    DecodeResult,
    FailureKind,
    StageFailure,
    StageName,
    StageResult,
)
from decoder.rules.shape_resolver import resolve_shape, wrap_output, wrap_response
from decoder.utils._json_parsing import decode_sanitized, decode_strict
from decoder.utils.emergency_extractor import extract_emergency
from decoder.utils.field_scanner import scan_field
from decoder.utils.sanitizer import process_response_message
from utils.errors import DecodeError, UnrecognizedShapeError, UnrecoverablePayloadError

Stage = Callable[[str], StageResult]

_STRUCTURED_STAGES = frozenset({StageName.STRICT, StageName.SANITIZED})

_module_logger = logging.getLogger(__name__)


class WebhookResponseDecoder:
    """Extrai a mensagem de resposta de um payload arbitrário do webhook.

    Sem estado entre chamadas: uma instância pode ser compartilhada por
    vários chamadores concorrentes.

    Args:
        settings: Limiares e marcadores. Se None, carrega do ambiente.
        logger: Destino dos eventos de diagnóstico. Se None, usa o logger
            do módulo. Nenhum evento inclui o conteúdo do payload.
    """

    def __init__(
        self,
        settings: DecoderSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._settings = settings or get_decoder_settings()
        self._logger = logger or _module_logger
        self._stages: tuple[Stage, ...] = (
            decode_strict,
            decode_sanitized,
            self._scan_fields,
            self._extract_emergency,
        )

    @property
    def stages(self) -> tuple[Stage, ...]:
        """Estágios na ordem em que são tentados."""
        return self._stages

    def decode(self, raw: str | bytes) -> DecodeResult:
        """Decodifica o payload e devolve a mensagem final.

        Args:
            raw: Corpo completo da resposta HTTP (texto ou bytes UTF-8)

        Returns:
            DecodeResult com mensagem, formato e estágio vencedor

        Raises:
            UnrecognizedShapeError: JSON parseado fora dos formatos conhecidos,
                ou estrutura parseada sem texto em nenhum estágio
            UnrecoverablePayloadError: Nenhum estágio extraiu conteúdo
        """
        text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
        self._logger.debug("webhook_decode_started", extra={"payload_length": len(text)})

        failures: list[StageFailure] = []
        parsed_structure = False

        for stage in self._stages:
            started = time.perf_counter()
            result = stage(text)
            if result.ok and result.stage in _STRUCTURED_STAGES:
                parsed_structure = True

            outcome = self._resolve(result)
            if isinstance(outcome, StageFailure):
                failures.append(outcome)
                if _is_unknown_structure(result, outcome):
                    # estrutura parseada sem formato conhecido é terminal
                    self._fail(text, failures, UnrecognizedShapeError)
                log_fallback(
                    self._logger,
                    f"webhook_decoder.{outcome.stage.value}",
                    reason=outcome.kind.value,
                    elapsed_ms=_elapsed_ms(started),
                )
                continue

            self._logger.debug(
                "webhook_decode_stage_succeeded",
                extra={
                    "stage": result.stage.value,
                    "shape": outcome.shape.value,
                    "message_length": len(outcome.message),
                    "failed_stages": len(failures),
                },
            )
            return DecodeResult(
                message=outcome.message,
                shape=outcome.shape,
                stage=result.stage,
                failures=tuple(failures),
            )

        error_cls = UnrecognizedShapeError if parsed_structure else UnrecoverablePayloadError
        self._fail(text, failures, error_cls)

    def _fail(
        self,
        text: str,
        failures: list[StageFailure],
        error_cls: type[DecodeError],
    ) -> NoReturn:
        self._logger.warning(
            "webhook_decode_failed",
            extra={
                "payload_length": len(text),
                "error_type": error_cls.__name__,
                "failures": [f"{f.stage.value}:{f.kind.value}" for f in failures],
            },
        )
        raise error_cls(payload_length=len(text), failures=tuple(failures))

    def _resolve(self, result: StageResult) -> DecodeResult | StageFailure:
        """Aplica resolver + pós-processamento ao candidato de um estágio."""
        if result.failure is not None:
            return result.failure

        decoded = resolve_shape(result.tree)
        if decoded is None:
            return StageFailure(result.stage, FailureKind.FIELD_NOT_FOUND, "unrecognized_shape")

        message = process_response_message(decoded.value, self._settings.empty_response_text)
        if not message:
            return StageFailure(result.stage, FailureKind.EMPTY_CONTENT, decoded.kind.value)

        return DecodeResult(message=message, shape=decoded.kind, stage=result.stage)

    def _scan_fields(self, raw: str) -> StageResult:
        scanned = scan_field(
            raw,
            self._settings.marker_names,
            min_length=self._settings.scanner_min_length,
        )
        if scanned is None:
            return StageResult.fail(StageName.FIELD_SCAN, FailureKind.FIELD_NOT_FOUND)

        if scanned.marker == "response":
            return StageResult.success(StageName.FIELD_SCAN, wrap_response(scanned.text))
        return StageResult.success(StageName.FIELD_SCAN, wrap_output(scanned.text))

    def _extract_emergency(self, raw: str) -> StageResult:
        content = extract_emergency(
            raw,
            min_length=self._settings.emergency_min_length,
            text_run_length=self._settings.emergency_text_run_length,
        )
        if not content:
            return StageResult.fail(StageName.EMERGENCY, FailureKind.FIELD_NOT_FOUND)
        return StageResult.success(StageName.EMERGENCY, wrap_output(content))


def _is_unknown_structure(result: StageResult, failure: StageFailure) -> bool:
    return result.stage in _STRUCTURED_STAGES and failure.kind is FailureKind.FIELD_NOT_FOUND


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 3)


def decode_webhook_response(
    raw: str | bytes,
    settings: DecoderSettings | None = None,
    logger: logging.Logger | None = None,
) -> str:
    """Atalho: decodifica o payload e retorna só a mensagem final.

    Raises:
        DecodeError: Quando nenhum estágio consegue extrair a resposta.
    """
    return WebhookResponseDecoder(settings=settings, logger=logger).decode(raw).message
