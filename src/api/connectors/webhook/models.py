"""Payloads enviados ao webhook de chat."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Literal

MessageType = Literal["text", "audio"]


def _utc_timestamp() -> str:
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True, slots=True)
class AudioData:
    """Áudio gravado, codificado em base64.

    Atributos:
        data: Conteúdo base64 (sem prefixo ``data:``)
        type: MIME type da gravação (ex: audio/webm;codecs=opus)
        encoding: Sempre "base64"
    """

    data: str
    type: str
    encoding: Literal["base64"] = "base64"

    def to_dict(self) -> dict[str, str]:
        return {"data": self.data, "type": self.type, "encoding": self.encoding}


@dataclass(frozen=True, slots=True)
class WebhookPayload:
    """Corpo JSON de uma mensagem do usuário.

    Atributos:
        message: Texto digitado (vazio para áudio)
        user_id: Identificador da sessão de chat
        message_type: "text" ou "audio"
        audio: Áudio anexado, quando message_type == "audio"
        timestamp: ISO-8601 UTC do envio
    """

    message: str
    user_id: str
    message_type: MessageType = "text"
    audio: AudioData | None = None
    timestamp: str = field(default_factory=_utc_timestamp)

    @classmethod
    def build(cls, message: str, user_id: str, audio: AudioData | None = None) -> WebhookPayload:
        return cls(
            message=message,
            user_id=user_id,
            message_type="audio" if audio else "text",
            audio=audio,
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "message": self.message,
            "timestamp": self.timestamp,
            "user_id": self.user_id,
            "message_type": self.message_type,
        }
        if self.audio is not None:
            payload["audio"] = self.audio.to_dict()
        return payload
