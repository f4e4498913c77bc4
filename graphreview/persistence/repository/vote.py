"""PostgreSQL implementation of Vote repository."""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from graphreview.domain.model import Vote
from graphreview.domain.repository import VoteRepository
from graphreview.domain.value import CommentId, UserId
from graphreview.persistence.mappers import row_to_vote, vote_to_dict
from graphreview.persistence.tables import comment_votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment."""
        stmt = select(comment_votes_table).where(
            and_(
                comment_votes_table.c.comment_id == comment_id,
                comment_votes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[Vote]:
        """Find a user's votes on multiple comments (batch query)."""
        if not comment_ids:
            return []

        stmt = select(comment_votes_table).where(
            and_(
                comment_votes_table.c.user_id == user_id,
                comment_votes_table.c.comment_id.in_(comment_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Count vote rows per comment (batch query)."""
        if not comment_ids:
            return {}

        stmt = (
            select(comment_votes_table.c.comment_id, func.count())
            .where(comment_votes_table.c.comment_id.in_(comment_ids))
            .group_by(comment_votes_table.c.comment_id)
        )
        result = await self.session.execute(stmt)
        return {CommentId(row[0]): int(row[1]) for row in result.fetchall()}

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or switch the type of the existing one."""
        vote_dict = vote_to_dict(vote)
        stmt = insert(comment_votes_table).values(**vote_dict)
        stmt = stmt.on_conflict_do_update(
            constraint="uq_comment_votes_comment_user",
            set_={
                "vote_type": stmt.excluded.vote_type,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(comment_votes_table)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict()) if row else vote

    async def delete_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> bool:
        """Delete a user's vote on a comment."""
        stmt = (
            delete(comment_votes_table)
            .where(
                and_(
                    comment_votes_table.c.comment_id == comment_id,
                    comment_votes_table.c.user_id == user_id,
                )
            )
            .returning(comment_votes_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted
