"""Testes para decoder/utils/sanitizer.py (pós-processamento)."""

from __future__ import annotations

import pytest

from decoder.utils.sanitizer import process_response_message, strip_control_chars


class TestProcessResponseMessage:
    """Testes para process_response_message."""

    def test_strips_audio_and_stickers_markers(self) -> None:
        """Remove [AUDIO] inicial e [FIGURINHAS] final."""
        message = "[AUDIO] Oi, obrigado pela mensagem [FIGURINHAS]"
        assert process_response_message(message) == "Oi, obrigado pela mensagem"

    def test_markers_are_case_insensitive(self) -> None:
        """Marcadores em minúsculas também são removidos."""
        assert process_response_message("[audio]Olá") == "Olá"
        assert process_response_message("Olá [figurinhas]") == "Olá"

    def test_markers_in_the_middle_are_kept(self) -> None:
        """Só remove marcadores nas bordas."""
        message = "Texto [AUDIO] no meio e [FIGURINHAS] também"
        assert process_response_message(message) == message

    def test_trims_surrounding_whitespace(self) -> None:
        """Espaços nas bordas são removidos."""
        assert process_response_message("  Olá!\n") == "Olá!"

    def test_removes_control_chars_keeps_tab_and_newlines(self) -> None:
        """Remove controles, mantém TAB, LF e CR."""
        message = "Linha\x00 1\nLinha\t2\r\nFim\x7f\x9f\x1b"
        assert process_response_message(message) == "Linha 1\nLinha\t2\r\nFim"

    def test_control_char_before_marker(self) -> None:
        """Controle antes do marcador não impede a remoção."""
        assert process_response_message("\x00[AUDIO] Oi") == "Oi"

    def test_markdown_is_left_untouched(self) -> None:
        """Markdown é responsabilidade da UI."""
        assert process_response_message("**Dica:** use *ganchos*") == "**Dica:** use *ganchos*"

    @pytest.mark.parametrize("value", [None, "", 42, 3.5, {"text": "x"}, ["x"], True])
    def test_non_string_or_empty_becomes_placeholder(self, value: object) -> None:
        """Valor ausente ou não-string vira 'Resposta vazia'."""
        assert process_response_message(value) == "Resposta vazia"

    def test_custom_empty_text(self) -> None:
        """Texto de vazio é configurável."""
        assert process_response_message(None, empty_text="(sem resposta)") == "(sem resposta)"

    @pytest.mark.parametrize(
        "message",
        [
            "Olá! Como posso ajudar?",
            "Linha 1\nLinha 2\tcom tab",
            "[AUDIO]  Oi \x01 [FIGURINHAS]",
            "  espaços \x00 ",
        ],
    )
    def test_is_idempotent(self, message: str) -> None:
        """Aplicar duas vezes dá o mesmo resultado."""
        once = process_response_message(message)
        assert process_response_message(once) == once

    def test_clean_value_is_unchanged(self) -> None:
        """Valor já limpo volta idêntico."""
        message = "Resposta do agente com *markdown*\n- item 1\n- item 2"
        assert process_response_message(message) == message


class TestStripControlChars:
    """Testes para strip_control_chars."""

    def test_removes_c0_del_and_c1(self) -> None:
        """Remove C0 (menos TAB/LF/CR), DEL e C1."""
        assert strip_control_chars("a\x01b\x0bc\x0cd\x7fe\x80f\x9fg") == "abcdefg"

    def test_keeps_tab_lf_cr(self) -> None:
        """TAB, LF e CR permanecem."""
        assert strip_control_chars("a\tb\nc\rd") == "a\tb\nc\rd"
