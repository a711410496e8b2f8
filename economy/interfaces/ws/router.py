"""WebSocket endpoint streaming economy events to the signed-in account."""
import logging

from fastapi import APIRouter, HTTPException, Query, WebSocket, WebSocketDisconnect

from economy.core.security import decode_access_token

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/ws/notifications")
async def notifications_socket(websocket: WebSocket, token: str = Query(...)):
    container = websocket.app.state.container
    try:
        account_id = decode_access_token(container.settings, token).account_id
    except HTTPException as exc:
        logger.error("WebSocket token invalid: %s", exc.detail)
        await websocket.close(code=1008, reason="Invalid token")
        return

    manager = container.connections
    await manager.connect(account_id, websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.info("Account %s disconnected", account_id)
    finally:
        await manager.disconnect(account_id, websocket)
