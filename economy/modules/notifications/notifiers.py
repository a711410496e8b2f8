"""Notification sinks."""

from __future__ import annotations

import logging
from typing import Protocol

from .models import NotificationEvent

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    async def notify(self, account_id: str, event: NotificationEvent) -> None:
        ...


class LoggingNotifier:
    """Writes events to the log; used when no live channel is configured."""

    async def notify(self, account_id: str, event: NotificationEvent) -> None:
        logger.info("Notify %s: %s %s", account_id, event.type.value, event.gift_id)


class NullNotifier:
    async def notify(self, account_id: str, event: NotificationEvent) -> None:
        return None
