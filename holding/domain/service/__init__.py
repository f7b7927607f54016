"""Domain services."""

from .access_service import AccessService
from .bag_item_service import BagItemService
from .bag_service import BagService
from .base import Clock, Service
from .invitation_service import InvitationPreview, InvitationService
from .jwt_service import JWTService
from .notification import BagEvent, NotificationSink
from .token_generator import TokenGenerator
from .user_service import UserService

__all__ = [
    "AccessService",
    "BagEvent",
    "BagItemService",
    "BagService",
    "Clock",
    "InvitationPreview",
    "InvitationService",
    "JWTService",
    "NotificationSink",
    "Service",
    "TokenGenerator",
    "UserService",
]
