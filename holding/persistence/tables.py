"""SQLAlchemy table definitions for Bag of Holding.

These table definitions back the PostgreSQL repositories.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("handle", String(50), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", Text, nullable=False),  # argon2 encoded hash
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# BAGS TABLE
# ============================================================================
bags_table = Table(
    "bags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(100), nullable=False),
    Column("description", Text, nullable=True),
    Column("owner_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_bags_owner_id", bags_table.c.owner_id)

# ============================================================================
# BAG ACCESS TABLE (one row per bag/user pair)
# ============================================================================
bag_access_table = Table(
    "bag_access",
    metadata,
    Column("bag_id", UUID, ForeignKey("bags.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "role",
        Enum("owner", "member", name="bag_role", create_type=False),
        nullable=False,
    ),
    Column(
        "granted_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("bag_id", "user_id", name="pk_bag_access"),
)

Index("idx_bag_access_user_id", bag_access_table.c.user_id)

# ============================================================================
# INVITATIONS TABLE (never deleted, kept for audit)
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("bag_id", UUID, ForeignKey("bags.id", ondelete="CASCADE"), nullable=False),
    Column(
        "inviter_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("token", String(255), nullable=False, unique=True),  # URL-safe token
    Column("email", String(255), nullable=True),
    Column(
        "status",
        Enum(
            "pending", "accepted", "expired", name="invitation_status", create_type=False
        ),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "accepted_by_user_id",
        UUID,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
)

Index(
    "idx_invitations_bag_created",
    invitations_table.c.bag_id,
    invitations_table.c.created_at.desc(),
)

# ============================================================================
# BAG ITEMS TABLE
# ============================================================================
bag_items_table = Table(
    "bag_items",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("bag_id", UUID, ForeignKey("bags.id", ondelete="CASCADE"), nullable=False),
    Column("name", String(200), nullable=False),
    Column("quantity", Integer, nullable=False, server_default="1"),
    Column("notes", Text, nullable=True),
    Column("created_by", UUID, ForeignKey("users.id"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("quantity >= 0", name="ck_bag_items_quantity_non_negative"),
)

Index("idx_bag_items_bag_id", bag_items_table.c.bag_id)
