"""PostgreSQL implementation of Contact repository."""

from sqlalchemy import and_, exists, or_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from oxytalk.domain.model import ContactEdge
from oxytalk.domain.repository import ContactRepository
from oxytalk.domain.value import IdentityId
from oxytalk.persistence.error import database_errors
from oxytalk.persistence.mappers import contact_to_dict, row_to_contact
from oxytalk.persistence.tables import contacts_table


class PostgresContactRepository(ContactRepository):
    """PostgreSQL implementation of ContactRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists(self, identity_a: IdentityId, identity_b: IdentityId) -> bool:
        """Check whether the unordered pair is a contact edge."""
        low, high = sorted((identity_a, identity_b))
        stmt = select(
            exists().where(
                and_(
                    contacts_table.c.identity_a == low,
                    contacts_table.c.identity_b == high,
                )
            )
        )
        with database_errors("check_contact"):
            result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def add(self, edge: ContactEdge) -> bool:
        """Insert an edge, doing nothing if the pair already exists."""
        stmt = (
            insert(contacts_table)
            .values(**contact_to_dict(edge))
            .on_conflict_do_nothing(constraint="unique_contact_pair")
            .returning(contacts_table.c.seq)
        )
        with database_errors("add_contact"):
            result = await self.session.execute(stmt)
            created = result.first() is not None
            await self.session.flush()
        return created

    async def find_for(self, identity_id: IdentityId) -> list[ContactEdge]:
        """Find edges touching an identity, in creation order."""
        stmt = (
            select(contacts_table)
            .where(
                or_(
                    contacts_table.c.identity_a == identity_id,
                    contacts_table.c.identity_b == identity_id,
                )
            )
            .order_by(contacts_table.c.seq)
        )
        with database_errors("list_contacts"):
            result = await self.session.execute(stmt)
        return [row_to_contact(dict(row)) for row in result.mappings().all()]
