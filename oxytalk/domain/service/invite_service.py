"""Invite domain service.

Invites are the only way two strangers become contacts. The state machine is
pending -> accepted | rejected, with both outcomes terminal.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from oxytalk.domain.error import (
    AlreadyContactsError,
    InviteNotFoundError,
    InvitePendingError,
    NotFoundError,
    SelfInviteError,
)
from oxytalk.domain.model import Invite
from oxytalk.domain.model.common import utcnow
from oxytalk.domain.repository import (
    IdentityDirectory,
    InviteRepository,
    MessageRepository,
)
from oxytalk.domain.value import (
    ChatId,
    IdentityId,
    InviteAction,
    InviteId,
    InviteStatus,
)

from .base import Service
from .contact_service import ContactService


@dataclass
class IncomingInvite:
    """Pending invite enriched with the sender's profile."""

    invite_id: InviteId
    from_identity: IdentityId
    from_display_name: str
    from_avatar_url: str | None
    created_at: datetime


@dataclass
class InviteResponse:
    """Outcome of responding to an invite.

    ``chat_id`` is only set when the invite was accepted.
    """

    invite: Invite
    counterpart: IdentityId
    chat_id: ChatId | None = None


class InviteService(Service):
    """Domain service for the invite lifecycle."""

    def __init__(
        self,
        invite_repository: InviteRepository,
        contact_service: ContactService,
        identity_directory: IdentityDirectory,
        message_repository: MessageRepository,
    ) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite repository
            contact_service: Contact graph domain service
            identity_directory: Identity directory
            message_repository: Message log, for creating the channel on accept
        """
        self.invite_repository = invite_repository
        self.contact_service = contact_service
        self.identity_directory = identity_directory
        self.message_repository = message_repository

    async def send_invite(
        self, from_identity: IdentityId, to_identity: IdentityId
    ) -> Invite:
        """Create a pending invite.

        Args:
            from_identity: Inviter
            to_identity: Invitee

        Returns:
            Created invite

        Raises:
            SelfInviteError: If inviting oneself
            NotFoundError: If the invitee does not exist
            AlreadyContactsError: If the two already are contacts
            InvitePendingError: If a pending invite exists in either direction
        """
        with logfire.span(
            "invite_service.send_invite",
            from_identity=from_identity,
            to_identity=to_identity,
        ):
            if from_identity == to_identity:
                raise SelfInviteError(from_identity)

            if await self.identity_directory.find_by_id(to_identity) is None:
                logfire.warn("Invite to unknown identity", to_identity=to_identity)
                raise NotFoundError("Identity", to_identity)

            if await self.contact_service.are_contacts(from_identity, to_identity):
                raise AlreadyContactsError(from_identity, to_identity)

            existing = await self.invite_repository.find_pending_between(
                from_identity, to_identity
            )
            if existing:
                logfire.warn(
                    "Invite already pending",
                    invite_id=str(existing.id),
                    from_identity=existing.from_identity,
                    to_identity=existing.to_identity,
                )
                raise InvitePendingError(from_identity, to_identity)

            invite = Invite(
                id=InviteId(uuid4()),
                from_identity=from_identity,
                to_identity=to_identity,
                status=InviteStatus.PENDING,
                created_at=utcnow(),
            )

            # A concurrent send for the same pair can slip past the check
            # above; the store's uniqueness rule on pending pairs settles it
            try:
                saved = await self.invite_repository.save(invite)
            except IntegrityError:
                logfire.warn(
                    "Concurrent pending invite",
                    from_identity=from_identity,
                    to_identity=to_identity,
                )
                raise InvitePendingError(from_identity, to_identity)

            logfire.info(
                "Invite sent",
                invite_id=str(saved.id),
                from_identity=from_identity,
                to_identity=to_identity,
            )
            return saved

    async def respond_invite(
        self, invite_id: InviteId, responder: IdentityId, action: InviteAction
    ) -> InviteResponse:
        """Accept or reject a pending invite.

        On accept, the contact edge and the channel's message log are created.
        Duplicate or concurrent responses on one invite fail: only the first
        transition out of pending wins.

        Args:
            invite_id: Invite to respond to
            responder: Identity responding, must be the invitee
            action: Accept or reject

        Returns:
            Updated invite, counterpart identity and (on accept) the chat id

        Raises:
            InviteNotFoundError: If no pending invite with that id is addressed
                to the responder
        """
        with logfire.span(
            "invite_service.respond_invite",
            invite_id=str(invite_id),
            responder=responder,
            action=action.value,
        ):
            invite = await self.invite_repository.find_by_id(invite_id)
            if (
                invite is None
                or invite.status.is_terminal
                or invite.to_identity != responder
            ):
                logfire.warn(
                    "No pending invite for responder",
                    invite_id=str(invite_id),
                    responder=responder,
                )
                raise InviteNotFoundError(str(invite_id))

            if action is InviteAction.ACCEPT:
                # Idempotent and unobservable on its own, so it goes first:
                # a failure here leaves the invite untouched
                await self.message_repository.ensure_channel(invite.chat_id)

            updated = await self.invite_repository.transition(
                invite_id, responder, action.resulting_status, utcnow()
            )
            if updated is None:
                logfire.warn("Lost invite response race", invite_id=str(invite_id))
                raise InviteNotFoundError(str(invite_id))

            if action is InviteAction.REJECT:
                logfire.info("Invite rejected", invite_id=str(invite_id))
                return InviteResponse(invite=updated, counterpart=updated.from_identity)

            await self.contact_service.add_contact(
                updated.from_identity, updated.to_identity
            )
            logfire.info(
                "Invite accepted",
                invite_id=str(invite_id),
                chat_id=str(updated.chat_id),
            )
            return InviteResponse(
                invite=updated,
                counterpart=updated.from_identity,
                chat_id=updated.chat_id,
            )

    async def list_incoming(self, identity_id: IdentityId) -> list[IncomingInvite]:
        """List pending invites addressed to an identity, oldest first.

        Args:
            identity_id: The invitee

        Returns:
            Pending invites enriched with the sender's display name and avatar
        """
        with logfire.span("invite_service.list_incoming", identity_id=identity_id):
            invites = await self.invite_repository.find_pending_for(identity_id)
            senders = (
                await self.identity_directory.find_many(
                    [invite.from_identity for invite in invites]
                )
                if invites
                else {}
            )

            incoming = []
            for invite in invites:
                sender = senders.get(invite.from_identity)
                incoming.append(
                    IncomingInvite(
                        invite_id=invite.id,
                        from_identity=invite.from_identity,
                        from_display_name=sender.display_name if sender else "Unknown",
                        from_avatar_url=sender.avatar_url if sender else None,
                        created_at=invite.created_at,
                    )
                )

            logfire.info(
                "Incoming invites listed", identity_id=identity_id, count=len(incoming)
            )
            return incoming
