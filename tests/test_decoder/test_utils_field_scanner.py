"""Testes para decoder/utils/field_scanner.py."""

from __future__ import annotations

from decoder.utils.field_scanner import (
    ScannedField,
    scan_field,
    scan_string_value,
    unescape_json_string,
)

LONG_RESPONSE = (
    "Aqui vão três ideias de roteiro para o seu canal: bastidores da gravação, "
    "tutorial rápido de edição e uma resposta aos comentários da semana."
)
LONG_OUTPUT = (
    "Sugestão de legenda para o post: comece com uma pergunta direta, conte a "
    "história em três frases curtas e termine com uma chamada para ação clara."
)


class TestScanStringValue:
    """Testes para scan_string_value (máquina de estados)."""

    def test_stops_at_quote_followed_by_brace(self) -> None:
        """Aspa seguida de } fecha o valor."""
        assert scan_string_value('abc"}', 0) == ("abc", True)

    def test_stops_at_quote_followed_by_bracket_after_whitespace(self) -> None:
        """Brancos entre a aspa e ] são ignorados."""
        assert scan_string_value('texto"  \n ]', 0) == ("texto", True)

    def test_inner_quotes_are_kept(self) -> None:
        """Aspa não escapada seguida de texto faz parte do valor."""
        content, terminated = scan_string_value('Ela disse "olá" para todos"}', 0)
        assert terminated is True
        assert content == 'Ela disse "olá" para todos'

    def test_quote_followed_by_comma_is_not_terminator(self) -> None:
        """Só } ou ] confirmam o fechamento."""
        content, terminated = scan_string_value('a", "b": "c"}', 0)
        assert terminated is True
        assert content == 'a", "b": "c'

    def test_escaped_quote_does_not_close(self) -> None:
        """\\" nunca fecha o valor, mesmo seguido de }."""
        content, terminated = scan_string_value('abc \\"} ainda dentro"}', 0)
        assert terminated is True
        assert content == 'abc \\"} ainda dentro'

    def test_escaped_backslash_before_quote(self) -> None:
        """\\\\ seguido de aspa: a aspa fecha o valor."""
        content, terminated = scan_string_value('abc \\\\"}', 0)
        assert terminated is True
        assert content == "abc \\\\"

    def test_truncated_value_returns_content(self) -> None:
        """Payload truncado devolve o que foi lido."""
        assert scan_string_value("texto sem fim", 0) == ("texto sem fim", False)

    def test_trailing_quote_at_end_is_content(self) -> None:
        """Aspa no fim sem fechamento vira conteúdo."""
        assert scan_string_value('texto"  ', 0) == ('texto"  ', False)

    def test_starts_at_given_index(self) -> None:
        """Varredura começa no índice informado."""
        assert scan_string_value('xx"valor"]', 3) == ("valor", True)


class TestUnescapeJsonString:
    """Testes para unescape_json_string."""

    def test_known_escapes(self) -> None:
        """Resolve aspas, quebras, tab e barra."""
        assert unescape_json_string(r'\"x\"\n\t\r\\') == '"x"\n\t\r\\'

    def test_escaped_backslash_is_not_newline(self) -> None:
        """\\\\n é barra + n, não quebra de linha."""
        assert unescape_json_string(r"C:\\novo") == "C:\\novo"

    def test_unknown_escapes_are_kept(self) -> None:
        """Escapes fora da lista ficam como estão."""
        assert unescape_json_string(r"caf\u00e9") == r"caf\u00e9"


class TestScanField:
    """Testes para scan_field."""

    def test_response_takes_precedence_over_output(self) -> None:
        """Com os dois campos longos, response vence."""
        raw = f'{{"output": "{LONG_OUTPUT}", "response": "{LONG_RESPONSE}"}} lixo'
        scanned = scan_field(raw)
        assert scanned == ScannedField("response", LONG_RESPONSE, True)

    def test_falls_back_to_output_when_response_is_short(self) -> None:
        """response curto é ruído; output longo vence."""
        raw = f'{{"response": "Oi"}} [{{"output": "{LONG_OUTPUT}"}}]'
        scanned = scan_field(raw)
        assert scanned is not None
        assert scanned.marker == "output"
        assert scanned.text == LONG_OUTPUT

    def test_value_must_exceed_threshold(self) -> None:
        """Exatamente o limiar não basta; precisa passar dele."""
        assert scan_field('{"response": "' + "a" * 100 + '"}') is None
        scanned = scan_field('{"response": "' + "a" * 101 + '"}')
        assert scanned is not None
        assert scanned.text == "a" * 101

    def test_no_markers_returns_none(self) -> None:
        """Sem marcadores não há candidato."""
        assert scan_field("texto qualquer " * 20) is None

    def test_marker_without_opening_quote_returns_none(self) -> None:
        """Marcador sem aspa depois dele é ignorado."""
        assert scan_field('{"response": 12345') is None

    def test_escapes_are_resolved(self) -> None:
        """Sequências de escape do valor são resolvidas."""
        value = LONG_RESPONSE + "\\nAssinado: \\\"Equipe\\\""
        scanned = scan_field('{"response": "' + value + '"}')
        assert scanned is not None
        assert scanned.text == LONG_RESPONSE + '\nAssinado: "Equipe"'

    def test_truncated_payload_is_accepted(self) -> None:
        """Valor cortado no fim do payload ainda é extraído."""
        scanned = scan_field('[{"output": "' + LONG_OUTPUT)
        assert scanned is not None
        assert scanned.terminated is False
        assert scanned.text == LONG_OUTPUT

    def test_custom_markers_and_threshold(self) -> None:
        """Marcadores e limiar são configuráveis."""
        scanned = scan_field('{"message": "curta"}', marker_names=("message",), min_length=3)
        assert scanned == ScannedField("message", "curta", True)
