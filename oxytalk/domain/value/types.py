"""Enumerated domain types for OxyTalk."""

from enum import Enum


class InviteStatus(str, Enum):
    """Status of an invite.

    ``pending`` is the only non-terminal state.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        """Whether no further transition is allowed."""
        return self is not InviteStatus.PENDING


class InviteAction(str, Enum):
    """Response an invitee can give to a pending invite."""

    ACCEPT = "accept"
    REJECT = "reject"

    @property
    def resulting_status(self) -> InviteStatus:
        """Terminal status this action moves an invite to."""
        if self is InviteAction.ACCEPT:
            return InviteStatus.ACCEPTED
        return InviteStatus.REJECTED
