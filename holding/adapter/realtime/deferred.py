"""Notification sink that waits for the transaction to commit."""

from functools import partial

from holding.domain.service.notification import BagEvent, NotificationSink, publish
from holding.domain.value import BagId
from holding.persistence.database import AfterCommit


class DeferredNotificationSink(NotificationSink):
    """Queues events and hands them to ``target`` after the request commits.

    A rolled-back request drops its events, so clients never hear about
    changes that were not stored.
    """

    def __init__(self, target: NotificationSink, after_commit: AfterCommit) -> None:
        self._target = target
        self._after_commit = after_commit

    async def broadcast(self, bag_id: BagId, event: BagEvent) -> None:
        self._after_commit.register(partial(publish, self._target, event))
