"""Real-time delivery of bag events."""

from .deferred import DeferredNotificationSink
from .hub import WebSocketNotificationSink
from .recording import RecordingNotificationSink

__all__ = [
    "DeferredNotificationSink",
    "WebSocketNotificationSink",
    "RecordingNotificationSink",
]
