"""Agregador de settings do serviço.

Re-exporta as settings de cada domínio.
"""

from __future__ import annotations

from config.settings.webhook import (
    DEFAULT_WEBHOOK_URL,
    WebhookSettings,
    generate_user_id,
    get_webhook_settings,
)

__all__ = [
    "DEFAULT_WEBHOOK_URL",
    "WebhookSettings",
    "generate_user_id",
    "get_webhook_settings",
]
