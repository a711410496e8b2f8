"""Fire-and-forget delivery of economy events."""

from __future__ import annotations

import asyncio
import logging

from .models import NotificationEvent
from .notifiers import Notifier

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Schedules deliveries in the background and swallows their failures.

    Callers dispatch only after their transaction committed; a failing or slow
    sink never affects the economic outcome.
    """

    def __init__(self, notifier: Notifier) -> None:
        self.notifier = notifier
        self._pending: set[asyncio.Task] = set()

    def dispatch(self, account_id: str, event: NotificationEvent) -> None:
        try:
            task = asyncio.get_running_loop().create_task(self._deliver(account_id, event))
        except RuntimeError:
            logger.warning("No running event loop, dropping %s for %s", event.type.value, account_id)
            return
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _deliver(self, account_id: str, event: NotificationEvent) -> None:
        try:
            await self.notifier.notify(account_id, event)
        except Exception:  # pylint: disable=broad-except
            logger.warning("Notification %s to %s failed", event.type.value, account_id, exc_info=True)

    async def drain(self) -> None:
        """Wait for in-flight deliveries; used at shutdown and in tests."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    @property
    def pending(self) -> int:
        return len(self._pending)
