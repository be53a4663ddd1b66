"""SQLAlchemy table definitions for OxyTalk.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Identity,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()


def identity_id_type() -> String:
    """Column type for identity ids.

    Byte-wise "C" collation, so the database orders pairs the way the domain
    sorts them; the sorted-pair check constraints depend on it.
    """
    return String(255, collation="C")


# ============================================================================
# IDENTITIES TABLE (owned by the identity service, read-only here)
# ============================================================================
identities_table = Table(
    "identities",
    metadata,
    Column("id", identity_id_type(), primary_key=True),  # Opaque identity id
    Column("display_name", String(64), nullable=False),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_identities_display_name", identities_table.c.display_name)

# ============================================================================
# INVITES TABLE
# ============================================================================
invites_table = Table(
    "invites",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "from_identity",
        identity_id_type(),
        ForeignKey("identities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "to_identity",
        identity_id_type(),
        ForeignKey("identities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # Sorted copy of the pair, so "either direction" is one index lookup
    Column("pair_low", identity_id_type(), nullable=False),
    Column("pair_high", identity_id_type(), nullable=False),
    Column(
        "status",
        Enum("pending", "accepted", "rejected", name="invite_status", create_type=False),
        nullable=False,
        server_default="pending",
    ),
    Column("seq", BigInteger, Identity(), nullable=False),  # Insertion order
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("responded_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("from_identity <> to_identity", name="check_invite_not_self"),
    CheckConstraint("pair_low < pair_high", name="check_invite_pair_sorted"),
)

Index("idx_invites_to_identity_status", invites_table.c.to_identity, invites_table.c.status)

# Partial unique constraint: only one pending invite per unordered pair
Index(
    "idx_invites_unique_pending_pair",
    invites_table.c.pair_low,
    invites_table.c.pair_high,
    unique=True,
    postgresql_where=invites_table.c.status == "pending",
)

# ============================================================================
# CONTACTS TABLE (one row per unordered pair, identity_a < identity_b)
# ============================================================================
contacts_table = Table(
    "contacts",
    metadata,
    Column(
        "identity_a",
        identity_id_type(),
        ForeignKey("identities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "identity_b",
        identity_id_type(),
        ForeignKey("identities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("seq", BigInteger, Identity(), nullable=False),  # Insertion order
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("identity_a", "identity_b", name="unique_contact_pair"),
    CheckConstraint("identity_a < identity_b", name="check_contact_pair_sorted"),
)

Index("idx_contacts_identity_a", contacts_table.c.identity_a)
Index("idx_contacts_identity_b", contacts_table.c.identity_b)

# ============================================================================
# CHANNELS TABLE
# ============================================================================
channels_table = Table(
    "channels",
    metadata,
    Column("chat_id", Text, primary_key=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# MESSAGES TABLE (append-only log per channel, ephemeral messages never land here)
# ============================================================================
messages_table = Table(
    "messages",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "chat_id",
        Text,
        ForeignKey("channels.chat_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("seq", BigInteger, Identity(), nullable=False),  # Delivery order
    Column("from_identity", identity_id_type(), nullable=False),
    Column("from_display_name", String(64), nullable=False),
    Column("from_avatar_url", Text, nullable=True),
    Column("text", Text, nullable=False),
    Column("timestamp", TIMESTAMP(timezone=True), nullable=False),
)

Index("idx_messages_chat_id_seq", messages_table.c.chat_id, messages_table.c.seq)
