"""Strongly typed identifiers for OxyTalk domain entities.

Identity IDs are opaque strings owned by the identity service; everything the
core mints itself (invites, messages, connections) uses UUIDs.
"""

from typing import NewType
from uuid import UUID

IdentityId = NewType("IdentityId", str)
InviteId = NewType("InviteId", UUID)
MessageId = NewType("MessageId", UUID)
ConnectionId = NewType("ConnectionId", UUID)
