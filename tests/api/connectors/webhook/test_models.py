"""Testes para os payloads do webhook de chat."""

from __future__ import annotations

import re

from api.connectors.webhook import AudioData, WebhookPayload


class TestWebhookPayload:
    """Testes para WebhookPayload."""

    def test_text_payload(self) -> None:
        """Texto: sem chave audio."""
        payload = WebhookPayload.build("Oi", "user_1")
        data = payload.to_dict()

        assert data["message_type"] == "text"
        assert set(data) == {"message", "timestamp", "user_id", "message_type"}
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", data["timestamp"])

    def test_audio_payload(self) -> None:
        """Áudio anexado muda o tipo da mensagem."""
        audio = AudioData(data="d2VibQ==", type="audio/webm")
        data = WebhookPayload.build("", "user_1", audio).to_dict()

        assert data["message_type"] == "audio"
        assert data["audio"] == {"data": "d2VibQ==", "type": "audio/webm", "encoding": "base64"}
