"""PostgreSQL implementation of Invite repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from oxytalk.domain.model import Invite
from oxytalk.domain.repository import InviteRepository
from oxytalk.domain.value import IdentityId, InviteId, InviteStatus
from oxytalk.persistence.error import database_errors
from oxytalk.persistence.mappers import invite_to_dict, row_to_invite
from oxytalk.persistence.tables import invites_table


class PostgresInviteRepository(InviteRepository):
    """PostgreSQL implementation of InviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID.

        Args:
            invite_id: Invite ID to look up

        Returns:
            Invite if found, None otherwise
        """
        stmt = select(invites_table).where(invites_table.c.id == invite_id)
        with database_errors("find_invite"):
            result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_pending_between(
        self, identity_a: IdentityId, identity_b: IdentityId
    ) -> Optional[Invite]:
        """Find the pending invite for an unordered pair.

        Served by the partial unique index on the sorted pair columns.
        """
        pair_low, pair_high = sorted((identity_a, identity_b))
        stmt = select(invites_table).where(
            and_(
                invites_table.c.pair_low == pair_low,
                invites_table.c.pair_high == pair_high,
                invites_table.c.status == InviteStatus.PENDING.value,
            )
        )
        with database_errors("find_pending_invite"):
            result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_pending_for(self, to_identity: IdentityId) -> list[Invite]:
        """Find pending invites addressed to an identity, oldest first."""
        stmt = (
            select(invites_table)
            .where(
                and_(
                    invites_table.c.to_identity == to_identity,
                    invites_table.c.status == InviteStatus.PENDING.value,
                )
            )
            .order_by(invites_table.c.seq)
        )
        with database_errors("find_incoming_invites"):
            result = await self.session.execute(stmt)
        return [row_to_invite(dict(row)) for row in result.mappings().all()]

    async def save(self, invite: Invite) -> Invite:
        """Insert a new invite.

        Raises:
            IntegrityError: If a pending invite already exists for the pair
        """
        stmt = insert(invites_table).values(**invite_to_dict(invite))
        with database_errors("save_invite"):
            await self.session.execute(stmt)
            await self.session.flush()
        return invite

    async def transition(
        self,
        invite_id: InviteId,
        responder: IdentityId,
        status: InviteStatus,
        responded_at: datetime,
    ) -> Optional[Invite]:
        """Move a pending invite to a terminal status.

        A single conditional UPDATE: of two concurrent responses, the second
        finds the row no longer pending (after the first commits) and
        updates nothing.
        """
        stmt = (
            update(invites_table)
            .where(
                and_(
                    invites_table.c.id == invite_id,
                    invites_table.c.to_identity == responder,
                    invites_table.c.status == InviteStatus.PENDING.value,
                )
            )
            .values(status=status.value, responded_at=responded_at)
            .returning(*invites_table.c)
        )
        with database_errors("respond_invite"):
            result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None
