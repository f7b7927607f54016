"""Real-time bag event stream."""

from uuid import UUID

import logfire
from dishka import AsyncContainer
from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status

from holding.adapter.realtime import WebSocketNotificationSink
from holding.domain.service import AccessService, JWTService
from holding.domain.value import BagId, UserId
from holding.util.jwt import JWTError

router = APIRouter(tags=["realtime"])


@router.websocket("/bags/{bag_id}/ws")
async def bag_events(websocket: WebSocket, bag_id: UUID, token: str | None = None):
    """Stream a bag's events to one of its members.

    The session token comes from the ``token`` query parameter (browsers
    cannot set headers on WebSocket requests) or the ``auth_token`` cookie.
    Access is checked once, at connect time.
    """
    container: AsyncContainer = websocket.app.state.dishka_container
    hub = await container.get(WebSocketNotificationSink)

    token = token or websocket.cookies.get("auth_token")
    if not token:
        await websocket.close(
            code=status.WS_1008_POLICY_VIOLATION, reason="No token provided"
        )
        return

    # Access check runs in its own request scope so no database session is
    # held for the lifetime of the socket
    async with container() as request_container:
        jwt_service = await request_container.get(JWTService)
        access_service = await request_container.get(AccessService)

        try:
            payload = jwt_service.verify_token(token)
        except JWTError as e:
            logfire.info("WebSocket rejected", bag_id=str(bag_id), reason=str(e))
            await websocket.close(
                code=status.WS_1008_POLICY_VIOLATION, reason="Invalid token"
            )
            return

        user_id = UserId(UUID(payload.user_id))
        if not await access_service.has_access(BagId(bag_id), user_id):
            logfire.info(
                "WebSocket rejected",
                bag_id=str(bag_id),
                user_id=str(user_id),
                reason="no access",
            )
            await websocket.close(
                code=status.WS_1008_POLICY_VIOLATION, reason="Forbidden"
            )
            return

    await websocket.accept()
    connection_id = await hub.connect(BagId(bag_id), user_id, websocket)
    try:
        while True:
            # Clients only listen; reading keeps the disconnect visible
            await websocket.receive_text()
    except WebSocketDisconnect:
        logfire.info(
            "WebSocket disconnected", bag_id=str(bag_id), connection_id=connection_id
        )
    finally:
        hub.disconnect(BagId(bag_id), connection_id)
