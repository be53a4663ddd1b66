"""Invite use cases."""

from oxytalk.application.usecase.invite.list_incoming_invites import (
    IncomingInviteItem,
    ListIncomingInvitesRequest,
    ListIncomingInvitesResponse,
    ListIncomingInvitesUseCase,
)
from oxytalk.application.usecase.invite.respond_invite import (
    RespondInviteRequest,
    RespondInviteResponse,
    RespondInviteUseCase,
)
from oxytalk.application.usecase.invite.send_invite import (
    SendInviteRequest,
    SendInviteResponse,
    SendInviteUseCase,
)

__all__ = [
    "IncomingInviteItem",
    "ListIncomingInvitesRequest",
    "ListIncomingInvitesResponse",
    "ListIncomingInvitesUseCase",
    "RespondInviteRequest",
    "RespondInviteResponse",
    "RespondInviteUseCase",
    "SendInviteRequest",
    "SendInviteResponse",
    "SendInviteUseCase",
]
