"""WebSocket fan-out of bag events.

Connections are held in process memory, keyed by bag. Running several API
processes needs a shared broker in front of this hub.
"""

import asyncio
from uuid import uuid4

import logfire
from fastapi import WebSocket, WebSocketDisconnect

from holding.domain.service.notification import BagEvent, NotificationSink
from holding.domain.value import BagId, UserId


class WebSocketNotificationSink(NotificationSink):
    """Notification sink that pushes events to connected WebSocket clients.

    ``broadcast`` only schedules delivery. Sends run in background tasks so a
    slow client never holds up the request that produced the event.
    """

    def __init__(self) -> None:
        self._connections: dict[BagId, dict[str, tuple[UserId, WebSocket]]] = {}
        self._tasks: set[asyncio.Task] = set()

    async def connect(self, bag_id: BagId, user_id: UserId, websocket: WebSocket) -> str:
        """Register an accepted WebSocket for a bag and return its connection id."""
        connection_id = str(uuid4())
        self._connections.setdefault(bag_id, {})[connection_id] = (user_id, websocket)
        logfire.info(
            "WebSocket connected",
            bag_id=str(bag_id),
            user_id=str(user_id),
            connection_id=connection_id,
        )
        return connection_id

    def disconnect(self, bag_id: BagId, connection_id: str) -> None:
        """Forget a connection. Unknown ids are ignored."""
        bag_connections = self._connections.get(bag_id)
        if not bag_connections:
            return
        bag_connections.pop(connection_id, None)
        if not bag_connections:
            self._connections.pop(bag_id, None)

    def connection_count(self, bag_id: BagId) -> int:
        return len(self._connections.get(bag_id, {}))

    async def broadcast(self, bag_id: BagId, event: BagEvent) -> None:
        """Schedule delivery of an event to every connection on the bag."""
        targets = list(self._connections.get(bag_id, {}).items())
        if not targets:
            return

        message = event.model_dump(mode="json")
        task = asyncio.create_task(self._deliver(bag_id, targets, message))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def drain(self) -> None:
        """Wait for scheduled deliveries to finish."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _deliver(
        self,
        bag_id: BagId,
        targets: list[tuple[str, tuple[UserId, WebSocket]]],
        message: dict,
    ) -> None:
        for connection_id, (_, websocket) in targets:
            if not await self._send(websocket, message):
                self.disconnect(bag_id, connection_id)

    async def _send(self, websocket: WebSocket, message: dict) -> bool:
        try:
            await websocket.send_json(message)
            return True
        except WebSocketDisconnect:
            logfire.warn("Event not sent, WebSocket is disconnected")
        except RuntimeError as e:
            logfire.warn("Event not sent", error=str(e))
        except Exception as e:
            logfire.error("Event not sent, unexpected error", error=str(e))
        return False
