"""Connection manager for account notification websockets."""
import json
import logging
from typing import Dict

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class ConnectionManager:
    def __init__(self) -> None:
        self.connections: Dict[str, set[WebSocket]] = {}

    async def connect(self, account_id: str, websocket: WebSocket) -> None:
        await websocket.accept()
        self.connections.setdefault(account_id, set()).add(websocket)
        logger.info("Account %s connected for notifications", account_id)

    async def disconnect(self, account_id: str, websocket: WebSocket) -> None:
        sockets = self.connections.get(account_id)
        if sockets is None:
            return
        sockets.discard(websocket)
        if not sockets:
            self.connections.pop(account_id, None)
        logger.info("Account %s notification socket closed", account_id)

    async def send_to_account(self, account_id: str, message: dict) -> bool:
        sockets = list(self.connections.get(account_id, ()))
        if not sockets:
            logger.debug("Account %s has no open notification socket", account_id)
            return False
        delivered = False
        for websocket in sockets:
            try:
                await websocket.send_text(json.dumps(message))
                delivered = True
            except Exception as exc:  # pylint: disable=broad-except
                logger.error("Failed to push notification to %s: %s", account_id, exc)
                await self.disconnect(account_id, websocket)
        return delivered

    def is_online(self, account_id: str) -> bool:
        return bool(self.connections.get(account_id))

    def get_online_count(self) -> int:
        return len(self.connections)
