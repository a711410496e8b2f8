"""Notifier that pushes economy events to connected websockets."""

from __future__ import annotations

from economy.modules.notifications import NotificationEvent

from .manager import ConnectionManager


class WebSocketNotifier:
    def __init__(self, connections: ConnectionManager) -> None:
        self.connections = connections

    async def notify(self, account_id: str, event: NotificationEvent) -> None:
        await self.connections.send_to_account(account_id, {"type": "economy_event", "data": event.to_message()})
