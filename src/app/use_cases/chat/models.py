"""Modelos da conversa exibida no criador de conteúdo."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum


class Sender(Enum):
    """Autor de uma bolha de mensagem."""

    USER = "user"
    AI = "ai"
    ERROR = "error"


class StatusType(Enum):
    """Estado do indicador de status do assistente."""

    ONLINE = "online"
    PROCESSING = "processing"
    RECORDING = "recording"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ChatStatus:
    """Texto e tipo do indicador de status."""

    text: str
    type: StatusType


ONLINE_STATUS = ChatStatus("Online e pronto para ajudar", StatusType.ONLINE)
PROCESSING_TEXT_STATUS = ChatStatus("Processando...", StatusType.PROCESSING)
PROCESSING_AUDIO_STATUS = ChatStatus("Processando áudio...", StatusType.PROCESSING)
TEXT_ERROR_STATUS = ChatStatus("Erro na conexão - Tente novamente", StatusType.ERROR)
AUDIO_ERROR_STATUS = ChatStatus("Erro - Tente novamente", StatusType.ERROR)


@dataclass(frozen=True, slots=True)
class ChatMessage:
    """Uma bolha da conversa.

    Atributos:
        id: Sequencial dentro da conversa
        content: Texto exibido (markdown é renderizado pela UI)
        sender: Autor da bolha
        is_audio: True para mensagens de áudio do usuário
        timestamp: Momento em que a bolha foi adicionada
    """

    id: int
    content: str
    sender: Sender
    is_audio: bool = False
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
