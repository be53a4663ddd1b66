"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from oxytalk.domain.model import ContactEdge, Identity, Invite, Message
from oxytalk.domain.value import (
    ChatId,
    IdentityId,
    InviteId,
    InviteStatus,
    MessageId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_identity(row: Dict[str, Any]) -> Identity:
    """Convert database row to Identity domain model.

    Args:
        row: Database row as dict

    Returns:
        Identity domain model
    """
    return Identity(
        id=IdentityId(row["id"]),
        display_name=row["display_name"],
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
    )


def identity_to_dict(identity: Identity) -> Dict[str, Any]:
    """Convert Identity domain model to database dict."""
    return identity.model_dump()


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict

    Returns:
        Invite domain model
    """
    return Invite(
        id=InviteId(_uuid(row["id"])),
        from_identity=IdentityId(row["from_identity"]),
        to_identity=IdentityId(row["to_identity"]),
        status=InviteStatus(row["status"]),
        created_at=row["created_at"],
        responded_at=row.get("responded_at"),
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to database dict.

    Adds the sorted pair columns backing the one-pending-invite-per-pair index.

    Args:
        invite: Invite domain model

    Returns:
        Dict suitable for database insertion
    """
    pair_low, pair_high = sorted((invite.from_identity, invite.to_identity))
    return {
        "id": invite.id,
        "from_identity": invite.from_identity,
        "to_identity": invite.to_identity,
        "pair_low": pair_low,
        "pair_high": pair_high,
        "status": invite.status.value,
        "created_at": invite.created_at,
        "responded_at": invite.responded_at,
    }


def row_to_contact(row: Dict[str, Any]) -> ContactEdge:
    """Convert database row to ContactEdge domain model."""
    return ContactEdge(
        identity_a=IdentityId(row["identity_a"]),
        identity_b=IdentityId(row["identity_b"]),
        created_at=row["created_at"],
    )


def contact_to_dict(edge: ContactEdge) -> Dict[str, Any]:
    """Convert ContactEdge domain model to database dict."""
    return edge.model_dump()


def row_to_message(row: Dict[str, Any]) -> Message:
    """Convert database row to Message domain model.

    Stored messages are never ephemeral.
    """
    return Message(
        id=MessageId(_uuid(row["id"])),
        chat_id=ChatId(row["chat_id"]),
        from_identity=IdentityId(row["from_identity"]),
        from_display_name=row["from_display_name"],
        from_avatar_url=row.get("from_avatar_url"),
        text=row["text"],
        timestamp=row["timestamp"],
    )


def message_to_dict(message: Message) -> Dict[str, Any]:
    """Convert Message domain model to database dict."""
    return {
        "id": message.id,
        "chat_id": str(message.chat_id),
        "from_identity": message.from_identity,
        "from_display_name": message.from_display_name,
        "from_avatar_url": message.from_avatar_url,
        "text": message.text,
        "timestamp": message.timestamp,
    }
