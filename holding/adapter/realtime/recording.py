"""Notification sink that keeps events in memory."""

from holding.domain.service.notification import BagEvent, NotificationSink
from holding.domain.value import BagId


class RecordingNotificationSink(NotificationSink):
    """Collects every broadcast event. Backs the in-memory test container."""

    def __init__(self) -> None:
        self.events: list[BagEvent] = []

    async def broadcast(self, bag_id: BagId, event: BagEvent) -> None:
        self.events.append(event)
