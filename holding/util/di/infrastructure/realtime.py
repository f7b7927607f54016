"""Real-time notification providers."""

from dishka import Scope, provide

from holding.adapter.realtime import DeferredNotificationSink, WebSocketNotificationSink
from holding.domain.service import NotificationSink
from holding.persistence.database import AfterCommit
from holding.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Realtime component base."""

    __mock_component__ = "realtime"


class ProdRealtimeProvider(RealtimeProvider):
    """WebSocket hub shared by the whole process."""

    __is_mock__ = False

    scope = Scope.APP

    @provide
    def get_hub(self) -> WebSocketNotificationSink:
        """Provide the WebSocket hub."""
        return WebSocketNotificationSink()

    @provide(scope=Scope.REQUEST)
    def get_notification_sink(
        self, hub: WebSocketNotificationSink, after_commit: AfterCommit
    ) -> NotificationSink:
        """Expose the hub to the domain, releasing events once the request commits."""
        return DeferredNotificationSink(hub, after_commit)
