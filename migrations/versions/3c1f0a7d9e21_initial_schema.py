"""initial_schema

Create the messaging core schema for OxyTalk:
- Identities (read model of the external identity service)
- Invites (pending -> accepted | rejected, one pending per unordered pair)
- Contacts (one row per unordered pair)
- Channels and messages (append-only, clearable log per chat id)

Revision ID: 3c1f0a7d9e21
Revises:
Create Date: 2026-10-19 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a7d9e21"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE invite_status AS ENUM ('pending', 'accepted', 'rejected');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # IDENTITIES
    # ========================================================================
    op.create_table(
        "identities",
        sa.Column("id", sa.String(255, collation="C"), nullable=False),
        sa.Column("display_name", sa.String(64), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_identities_display_name", "identities", ["display_name"])

    # ========================================================================
    # INVITES
    # ========================================================================
    op.create_table(
        "invites",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("from_identity", sa.String(255, collation="C"), nullable=False),
        sa.Column("to_identity", sa.String(255, collation="C"), nullable=False),
        sa.Column("pair_low", sa.String(255, collation="C"), nullable=False),
        sa.Column("pair_high", sa.String(255, collation="C"), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(
                "pending",
                "accepted",
                "rejected",
                name="invite_status",
                create_type=False,
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("seq", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("responded_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["from_identity"], ["identities.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["to_identity"], ["identities.id"], ondelete="CASCADE"),
        sa.CheckConstraint("from_identity <> to_identity", name="check_invite_not_self"),
        sa.CheckConstraint("pair_low < pair_high", name="check_invite_pair_sorted"),
    )
    op.create_index(
        "idx_invites_to_identity_status", "invites", ["to_identity", "status"]
    )

    # Partial unique constraint: only one pending invite per unordered pair
    op.execute("""
        CREATE UNIQUE INDEX idx_invites_unique_pending_pair
        ON invites (pair_low, pair_high)
        WHERE status = 'pending'
    """)

    # ========================================================================
    # CONTACTS
    # ========================================================================
    op.create_table(
        "contacts",
        sa.Column("identity_a", sa.String(255, collation="C"), nullable=False),
        sa.Column("identity_b", sa.String(255, collation="C"), nullable=False),
        sa.Column("seq", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["identity_a"], ["identities.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["identity_b"], ["identities.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("identity_a", "identity_b", name="unique_contact_pair"),
        sa.CheckConstraint("identity_a < identity_b", name="check_contact_pair_sorted"),
    )
    op.create_index("idx_contacts_identity_a", "contacts", ["identity_a"])
    op.create_index("idx_contacts_identity_b", "contacts", ["identity_b"])

    # ========================================================================
    # CHANNELS AND MESSAGES
    # ========================================================================
    op.create_table(
        "channels",
        sa.Column("chat_id", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("chat_id"),
    )

    op.create_table(
        "messages",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("chat_id", sa.Text(), nullable=False),
        sa.Column("seq", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("from_identity", sa.String(255, collation="C"), nullable=False),
        sa.Column("from_display_name", sa.String(64), nullable=False),
        sa.Column("from_avatar_url", sa.Text(), nullable=True),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("timestamp", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["chat_id"], ["channels.chat_id"], ondelete="CASCADE"),
    )
    op.create_index("idx_messages_chat_id_seq", "messages", ["chat_id", "seq"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("messages")
    op.drop_table("channels")
    op.drop_table("contacts")
    op.drop_table("invites")
    op.drop_table("identities")
    op.execute("DROP TYPE IF EXISTS invite_status")
