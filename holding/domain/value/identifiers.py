"""Strongly typed identifiers for Bag of Holding domain entities.

Using NewType keeps a bag id from being passed where a user id is expected.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
BagId = NewType("BagId", UUID)
BagItemId = NewType("BagItemId", UUID)
InvitationId = NewType("InvitationId", UUID)
