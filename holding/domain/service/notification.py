"""Real-time notification contract.

Mutations on a bag (items changing, members joining) are announced to
everyone connected to that bag. The sink is fire-and-forget: a failed or
slow delivery must never fail or roll back the mutation that caused it.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

import logfire
from pydantic import Field

from holding.domain.model.common import utcnow
from holding.domain.value import BagEventType, BagId, UserId
from holding.domain.value.common import ValueObject


class BagEvent(ValueObject):
    """Event broadcast to a bag's channel.

    Consumers must tolerate duplicates; transports may redeliver.
    """

    type: BagEventType
    bag_id: BagId
    actor_id: UserId
    payload: dict[str, Any] = Field(default_factory=dict)
    occurred_at: datetime = Field(default_factory=utcnow)


class NotificationSink(ABC):
    """Broadcast target scoped per bag."""

    @abstractmethod
    async def broadcast(self, bag_id: BagId, event: BagEvent) -> None:
        """Hand an event to the transport without waiting for delivery.

        Implementations log and drop delivery failures instead of raising.
        """
        pass


async def publish(sink: NotificationSink, event: BagEvent) -> None:
    """Broadcast ``event`` to its bag, logging rather than raising on failure."""
    try:
        await sink.broadcast(event.bag_id, event)
    except Exception as e:
        logfire.error(
            "Notification broadcast failed",
            bag_id=str(event.bag_id),
            event_type=event.type.value,
            error=str(e),
        )
