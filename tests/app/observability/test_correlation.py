"""Testes para app/observability/correlation.py."""

from __future__ import annotations

from app.observability import (
    correlation_scope,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)


class TestCorrelationId:
    """Testes para set/get/reset e correlation_scope."""

    def test_default_is_empty(self) -> None:
        assert get_correlation_id() == ""

    def test_set_generates_uuid_when_missing(self) -> None:
        """Sem valor explícito, gera um UUID."""
        token = set_correlation_id()
        try:
            assert len(get_correlation_id()) == 36
        finally:
            reset_correlation_id(token)
        assert get_correlation_id() == ""

    def test_scope_restores_previous_value(self) -> None:
        """Escopos aninhados restauram o id anterior."""
        with correlation_scope("externo") as outer:
            assert outer == "externo"
            with correlation_scope() as inner:
                assert inner != "externo"
                assert get_correlation_id() == inner
            assert get_correlation_id() == "externo"
        assert get_correlation_id() == ""
