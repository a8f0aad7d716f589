"""Testes para app/bootstrap."""

from __future__ import annotations

import logging

import pytest

from app.bootstrap import (
    create_send_chat_message_use_case,
    initialize_app,
    validate_runtime_settings,
)
from app.use_cases.chat import ONLINE_STATUS, SendChatMessageUseCase
from config.logging import CorrelationIdFilter
from config.settings import WebhookSettings


class TestValidateRuntimeSettings:
    """Validação de settings no startup."""

    def test_valid_settings_pass(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        validate_runtime_settings()

    def test_invalid_settings_fail_in_production(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Em production a configuração inválida impede o boot."""
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("CHAT_WEBHOOK_URL", "webhook-sem-esquema")
        monkeypatch.setenv("DECODER_SCANNER_MIN_LENGTH", "0")

        with pytest.raises(RuntimeError, match="Configuração inválida para production") as exc:
            validate_runtime_settings()

        assert "webhook: CHAT_WEBHOOK_URL" in str(exc.value)
        assert "decoder: DECODER_SCANNER_MIN_LENGTH" in str(exc.value)

    def test_invalid_settings_only_warn_in_development(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Em development apenas registra o alerta."""
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("CHAT_WEBHOOK_URL", "webhook-sem-esquema")

        validate_runtime_settings()


class TestInitializeApp:
    """Testes para initialize_app."""

    def test_configures_json_logging(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("ENVIRONMENT", "test")

        initialize_app()

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)


class TestCreateUseCase:
    """Testes para create_send_chat_message_use_case."""

    def test_wires_client_and_cooldowns(self) -> None:
        settings = WebhookSettings(
            url="https://webhook.exemplo.test/chat",
            user_id="user_fixo",
            status_cooldown_seconds=3.0,
            audio_status_cooldown_seconds=1.0,
        )

        use_case = create_send_chat_message_use_case(settings)

        assert isinstance(use_case, SendChatMessageUseCase)
        assert use_case.status == ONLINE_STATUS
        assert use_case.messages == ()
