"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from graphreview.domain.model.vote import Vote
from graphreview.domain.repository.vote import VoteRepository
from graphreview.domain.value import CommentId, UserId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[tuple[CommentId, UserId], Vote] = {}

    async def find_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment."""
        return self._votes.get((comment_id, user_id))

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> list[Vote]:
        """Find a user's votes on multiple comments (batch query)."""
        wanted = set(comment_ids)
        return [
            v
            for v in self._votes.values()
            if v.user_id == user_id and v.comment_id in wanted
        ]

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count vote rows per comment."""
        counts: dict[CommentId, int] = {}
        wanted = set(comment_ids)
        for vote in self._votes.values():
            if vote.comment_id in wanted:
                counts[vote.comment_id] = counts.get(vote.comment_id, 0) + 1
        return counts

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or switch the type of the existing one."""
        key = (vote.comment_id, vote.user_id)
        existing = self._votes.get(key)
        if existing:
            vote = existing.model_copy(
                update={"vote_type": vote.vote_type, "updated_at": vote.updated_at}
            )
        self._votes[key] = vote
        return vote

    async def delete_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> bool:
        """Delete a user's vote on a comment."""
        return self._votes.pop((comment_id, user_id), None) is not None
