"""PostgreSQL implementation of Profile repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from graphreview.domain.model import UserIdentity
from graphreview.domain.repository import ProfileRepository
from graphreview.domain.value import UserId
from graphreview.persistence.mappers import profile_to_dict, row_to_profile
from graphreview.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_all(self) -> List[UserIdentity]:
        """List every profile ordered by name."""
        stmt = select(profiles_table).order_by(profiles_table.c.name)
        result = await self.session.execute(stmt)
        return [row_to_profile(row._asdict()) for row in result.fetchall()]

    async def find_by_id(self, user_id: UserId) -> Optional[UserIdentity]:
        """Find a profile by user ID."""
        stmt = select(profiles_table).where(profiles_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def save(self, profile: UserIdentity) -> UserIdentity:
        """Create or update a profile."""
        stmt = insert(profiles_table).values(**profile_to_dict(profile))
        stmt = stmt.on_conflict_do_update(
            index_elements=[profiles_table.c.id],
            set_={"name": stmt.excluded.name, "email": stmt.excluded.email},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return profile
