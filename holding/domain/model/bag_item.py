"""Bag item entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from holding.domain.model.common import DomainModel, utcnow
from holding.domain.value import BagId, BagItemId, UserId


class BagItem(DomainModel):
    """An item stored in a bag with a non-negative quantity."""

    id: BagItemId
    bag_id: BagId
    name: str = Field(min_length=1, max_length=200)
    quantity: int = Field(default=1, ge=0)
    notes: Optional[str] = Field(default=None, max_length=2000)
    created_by: UserId
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
