"""PostgreSQL implementation of the identity directory."""

from typing import Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from oxytalk.domain.model import Identity
from oxytalk.domain.repository import IdentityDirectory
from oxytalk.domain.value import IdentityId
from oxytalk.persistence.error import database_errors
from oxytalk.persistence.mappers import identity_to_dict, row_to_identity
from oxytalk.persistence.tables import identities_table


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresIdentityDirectory(IdentityDirectory):
    """PostgreSQL implementation of IdentityDirectory."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, identity_id: IdentityId) -> Optional[Identity]:
        """Find an identity by ID."""
        stmt = select(identities_table).where(identities_table.c.id == identity_id)
        with database_errors("find_identity"):
            result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_identity(dict(row)) if row else None

    async def find_many(
        self, identity_ids: list[IdentityId]
    ) -> dict[IdentityId, Identity]:
        """Find several identities in one query."""
        if not identity_ids:
            return {}
        stmt = select(identities_table).where(
            identities_table.c.id.in_(set(identity_ids))
        )
        with database_errors("find_identities"):
            result = await self.session.execute(stmt)
        identities = [row_to_identity(dict(row)) for row in result.mappings().all()]
        return {identity.id: identity for identity in identities}

    async def search_by_display_name_prefix(
        self, query: str, excluding: IdentityId, limit: int
    ) -> list[Identity]:
        """Case-insensitive display name prefix search, ordered by display name."""
        stmt = (
            select(identities_table)
            .where(
                identities_table.c.display_name.ilike(
                    f"{_escape_like(query)}%", escape="\\"
                ),
                identities_table.c.id != excluding,
            )
            .order_by(func.lower(identities_table.c.display_name), identities_table.c.id)
            .limit(limit)
        )
        with database_errors("search_identities"):
            result = await self.session.execute(stmt)
        return [row_to_identity(dict(row)) for row in result.mappings().all()]

    async def save(self, identity: Identity) -> Identity:
        """Save an identity (create or update)."""
        identity_dict = identity_to_dict(identity)

        with database_errors("save_identity"):
            existing = await self.find_by_id(identity.id)
            if existing:
                stmt = (
                    update(identities_table)
                    .where(identities_table.c.id == identity.id)
                    .values(**identity_dict)
                )
            else:
                stmt = insert(identities_table).values(**identity_dict)
            await self.session.execute(stmt)
            await self.session.flush()
        return identity
