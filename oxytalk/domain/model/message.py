"""Message entity."""

from datetime import datetime

from oxytalk.domain.model.common import DomainModel
from oxytalk.domain.value import ChatId, IdentityId, MessageId


class Message(DomainModel):
    """A chat message, immutable once created by the router.

    Ephemeral ("once-view") messages are delivered live and never stored.
    """

    id: MessageId
    chat_id: ChatId
    from_identity: IdentityId
    from_display_name: str
    from_avatar_url: str | None = None
    text: str
    timestamp: datetime
    ephemeral: bool = False
