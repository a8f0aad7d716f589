"""Utilitários do decodificador.

Re-exporta os estágios de extração e o pós-processamento.
"""

from decoder.utils._json_parsing import clean_json_string, decode_sanitized, decode_strict
from decoder.utils.emergency_extractor import extract_emergency, longest_text_run
from decoder.utils.field_scanner import (
    ScannedField,
    ScanState,
    scan_field,
    scan_string_value,
    unescape_json_string,
)
from decoder.utils.sanitizer import process_response_message, strip_control_chars

__all__ = [
    "ScanState",
    "ScannedField",
    # Decodificadores estruturados
    "clean_json_string",
    "decode_sanitized",
    "decode_strict",
    # Emergência
    "extract_emergency",
    "longest_text_run",
    # Pós-processamento
    "process_response_message",
    # Varredura de campos
    "scan_field",
    "scan_string_value",
    "strip_control_chars",
    "unescape_json_string",
]
