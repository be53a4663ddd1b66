"""Chat channel identifiers.

A chat id is derived from the two participant identities alone, so both sides
can address their channel without asking the server for it. The pair is sorted
and each identity percent-encoded before joining, which keeps the mapping
injective even for identities containing the separator.
"""

from urllib.parse import quote, unquote

from oxytalk.domain.value.common import RootValueObject
from oxytalk.domain.value.identifiers import IdentityId

CHAT_PREFIX = "chat"
SEPARATOR = ":"


class ChatId(RootValueObject[str]):
    """Identifier of the message channel shared by one contact pair.

    Any string is accepted so that ids arriving from clients can be carried
    around; ``participants()`` tells whether the id is well formed.
    """

    def participants(self) -> tuple[IdentityId, IdentityId] | None:
        """Decompose the chat id into its two participants.

        Returns:
            The sorted participant pair, or None if the id is malformed
        """
        parts = self.root.split(SEPARATOR)
        if len(parts) != 3 or parts[0] != CHAT_PREFIX:
            return None
        first, second = unquote(parts[1]), unquote(parts[2])
        if not first or not second or first == second:
            return None
        # Only the canonical encoding is valid, otherwise two spellings of
        # one pair would address two different logs
        if derive_chat_id(IdentityId(first), IdentityId(second)) != self:
            return None
        return IdentityId(first), IdentityId(second)

    def involves(self, identity_id: IdentityId) -> bool:
        """Check whether an identity is one of the two participants."""
        pair = self.participants()
        return pair is not None and identity_id in pair

    def counterpart(self, identity_id: IdentityId) -> IdentityId | None:
        """Return the other participant, or None if not a participant."""
        pair = self.participants()
        if pair is None or identity_id not in pair:
            return None
        return pair[1] if pair[0] == identity_id else pair[0]


def derive_chat_id(identity_a: IdentityId, identity_b: IdentityId) -> ChatId:
    """Derive the chat id for an unordered pair of identities.

    Pure and commutative: ``derive_chat_id(a, b) == derive_chat_id(b, a)``.

    Args:
        identity_a: One participant
        identity_b: The other participant

    Returns:
        Canonical chat id for the pair
    """
    low, high = sorted((identity_a, identity_b))
    return ChatId(
        SEPARATOR.join((CHAT_PREFIX, quote(low, safe=""), quote(high, safe="")))
    )
