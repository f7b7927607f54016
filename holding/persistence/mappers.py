"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from holding.domain.model import AccessGrant, Bag, BagItem, Invitation, User
from holding.domain.value import (
    BagId,
    BagItemId,
    Email,
    Handle,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    Role,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        handle=Handle(row["handle"]),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_bag(row: Dict[str, Any]) -> Bag:
    """Convert database row to Bag domain model."""
    return Bag(
        id=BagId(_uuid(row["id"])),
        name=row["name"],
        description=row.get("description"),
        owner_id=UserId(_uuid(row["owner_id"])),
        created_at=row["created_at"],
    )


def bag_to_dict(bag: Bag) -> Dict[str, Any]:
    """Convert Bag domain model to database dict."""
    return bag.model_dump()


def row_to_access_grant(row: Dict[str, Any]) -> AccessGrant:
    """Convert database row to AccessGrant domain model."""
    return AccessGrant(
        bag_id=BagId(_uuid(row["bag_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        role=Role(row["role"]),
        granted_at=row["granted_at"],
    )


def access_grant_to_dict(grant: AccessGrant) -> Dict[str, Any]:
    """Convert AccessGrant domain model to database dict."""
    data = grant.model_dump()
    data["role"] = grant.role.value
    return data


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model.

    Args:
        row: Database row as dict

    Returns:
        Invitation domain model
    """
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        bag_id=BagId(_uuid(row["bag_id"])),
        inviter_id=UserId(_uuid(row["inviter_id"])),
        token=InvitationToken(root=row["token"]),
        email=Email(row["email"]) if row.get("email") else None,
        status=InvitationStatus(row["status"]),
        created_at=row["created_at"],
        expires_at=row["expires_at"],
        accepted_at=row.get("accepted_at"),
        accepted_by_user_id=UserId(_uuid(row["accepted_by_user_id"]))
        if row.get("accepted_by_user_id")
        else None,
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict.

    Token and email are RootModels, so model_dump() yields plain strings.
    """
    data = invitation.model_dump()
    data["status"] = invitation.status.value
    return data


def row_to_bag_item(row: Dict[str, Any]) -> BagItem:
    """Convert database row to BagItem domain model."""
    return BagItem(
        id=BagItemId(_uuid(row["id"])),
        bag_id=BagId(_uuid(row["bag_id"])),
        name=row["name"],
        quantity=row["quantity"],
        notes=row.get("notes"),
        created_by=UserId(_uuid(row["created_by"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def bag_item_to_dict(item: BagItem) -> Dict[str, Any]:
    """Convert BagItem domain model to database dict."""
    return item.model_dump()
