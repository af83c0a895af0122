"""WebSocket relay for user-to-user chat and conference signalling.

Clients send JSON envelopes:

    {"type": "register"}
    {"type": "chat", "recipientId": "...", "message": ...}
    {"type": "conference", "recipientId": "...", "signal": ...}

Frames for recipients that are not connected are dropped.
"""
import json
import logging
import secrets
from typing import Dict

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Realtime"])

# Envelope type -> payload key forwarded to the recipient
RELAYED_PAYLOADS = {
    "chat": "message",
    "conference": "signal",
}


class ConnectionManager:
    def __init__(self):
        self.active_connections: Dict[str, WebSocket] = {}

    async def connect(self, websocket: WebSocket) -> str:
        await websocket.accept()
        connection_id = secrets.token_hex(6)
        self.active_connections[connection_id] = websocket
        logger.info(f"WebSocket {connection_id} connected ({len(self.active_connections)} open)")
        return connection_id

    def disconnect(self, connection_id: str):
        self.active_connections.pop(connection_id, None)
        logger.info(f"WebSocket {connection_id} disconnected")

    async def relay(self, sender_id: str, data: dict) -> bool:
        """Forward a chat/conference envelope; False if it could not be delivered."""
        payload_key = RELAYED_PAYLOADS[data["type"]]
        recipient_id = data.get("recipientId")
        if not isinstance(recipient_id, str):
            return False
        recipient = self.active_connections.get(recipient_id)
        if recipient is None or recipient.client_state != WebSocketState.CONNECTED:
            return False

        try:
            await recipient.send_text(json.dumps({
                "type": data["type"],
                "senderId": sender_id,
                payload_key: data.get(payload_key)
            }))
        except RuntimeError as e:
            logger.warning(f"Dropping frame for {recipient_id}: {str(e)}")
            self.disconnect(recipient_id)
            return False
        return True

    async def handle(self, connection_id: str, websocket: WebSocket, raw: str):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(f"Ignoring malformed frame from {connection_id}")
            return

        if not isinstance(data, dict):
            return

        message_type = data.get("type")
        if not isinstance(message_type, str):
            return

        if message_type == "register":
            await websocket.send_text(json.dumps({"type": "register", "id": connection_id}))
        elif message_type in RELAYED_PAYLOADS:
            await self.relay(connection_id, data)


manager = ConnectionManager()


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    connection_id = await manager.connect(websocket)
    try:
        while True:
            raw = await websocket.receive_text()
            await manager.handle(connection_id, websocket, raw)
    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(connection_id)
