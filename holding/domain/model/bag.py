"""Bag entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from holding.domain.model.common import DomainModel, utcnow
from holding.domain.value import BagId, UserId


class Bag(DomainModel):
    """A named container shared between its owner and members.

    The owner reference records who created the bag. Who may act on it is
    decided by access grants, not by this field.
    """

    id: BagId
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=1000)
    owner_id: UserId
    created_at: datetime = Field(default_factory=utcnow)
