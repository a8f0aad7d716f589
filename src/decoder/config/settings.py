"""Settings do decodificador de respostas do webhook.

Os limiares de tamanho usados pelos estágios heurísticos são empíricos;
ficam aqui para permitir ajuste sem tocar na lógica de varredura.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_MARKER_NAMES: tuple[str, ...] = ("response", "output")
EMPTY_RESPONSE_TEXT = "Resposta vazia"


@dataclass(frozen=True, slots=True)
class DecoderSettings:
    """Limiares e marcadores do pipeline de decodificação.

    Atributos:
        scanner_min_length: Valor varrido precisa ter mais que N caracteres
        emergency_min_length: Candidato de emergência precisa ter mais que N
        emergency_text_run_length: Tamanho mínimo de um trecho de texto livre
        marker_names: Campos procurados pelo scanner, em ordem de precedência
        empty_response_text: Texto usado quando o campo não é string
    """

    scanner_min_length: int = 100
    emergency_min_length: int = 50
    emergency_text_run_length: int = 100
    marker_names: tuple[str, ...] = DEFAULT_MARKER_NAMES
    empty_response_text: str = EMPTY_RESPONSE_TEXT

    def validate(self) -> list[str]:
        """Valida limiares.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.scanner_min_length < 1:
            errors.append("DECODER_SCANNER_MIN_LENGTH deve ser >= 1")

        if self.emergency_min_length < 1:
            errors.append("DECODER_EMERGENCY_MIN_LENGTH deve ser >= 1")

        if self.emergency_text_run_length < 1:
            errors.append("DECODER_EMERGENCY_TEXT_RUN_LENGTH deve ser >= 1")

        if not self.marker_names:
            errors.append("marker_names não pode ser vazio")

        return errors


def _load_decoder_settings_from_env() -> DecoderSettings:
    """Carrega DecoderSettings de variáveis de ambiente."""
    return DecoderSettings(
        scanner_min_length=int(os.getenv("DECODER_SCANNER_MIN_LENGTH", "100")),
        emergency_min_length=int(os.getenv("DECODER_EMERGENCY_MIN_LENGTH", "50")),
        emergency_text_run_length=int(os.getenv("DECODER_EMERGENCY_TEXT_RUN_LENGTH", "100")),
    )


@lru_cache(maxsize=1)
def get_decoder_settings() -> DecoderSettings:
    """Retorna instância cacheada de DecoderSettings."""
    return _load_decoder_settings_from_env()
