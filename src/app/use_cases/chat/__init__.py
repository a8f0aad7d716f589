"""Use cases do chat do criador de conteúdo."""

from .models import (
    AUDIO_ERROR_STATUS,
    ONLINE_STATUS,
    PROCESSING_AUDIO_STATUS,
    PROCESSING_TEXT_STATUS,
    TEXT_ERROR_STATUS,
    ChatMessage,
    ChatStatus,
    Sender,
    StatusType,
)
from .send_message import SendChatMessageUseCase

__all__ = [
    "AUDIO_ERROR_STATUS",
    "ONLINE_STATUS",
    "PROCESSING_AUDIO_STATUS",
    "PROCESSING_TEXT_STATUS",
    "TEXT_ERROR_STATUS",
    "ChatMessage",
    "ChatStatus",
    "SendChatMessageUseCase",
    "Sender",
    "StatusType",
]
