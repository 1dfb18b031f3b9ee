from __future__ import annotations

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from artapp.notifications import notification_manager

router = APIRouter()


@router.websocket("/ws/notifications")
async def notifications_endpoint(websocket: WebSocket) -> None:
    """Stream search state and favorites changes to connected clients."""
    await notification_manager.connect(websocket)
    try:
        await websocket.send_json({"type": "welcome", "message": "notifications-ready"})
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    except Exception:
        await websocket.close(code=1011)
    finally:
        await notification_manager.disconnect(websocket)
