"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from graphreview.domain.model.vote import Vote
from graphreview.domain.value import CommentId, UserId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment.

        Args:
            comment_id: ID of the comment
            user_id: The user's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[Vote]:
        """Find a user's votes on multiple comments (batch query).

        Args:
            user_id: The user's ID
            comment_ids: Comment IDs to check

        Returns:
            List of votes by the user on the specified comments
        """
        pass

    @abstractmethod
    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count votes per comment (batch query).

        Args:
            comment_ids: Comment IDs to count

        Returns:
            Mapping of comment ID to number of votes; comments without
            votes may be missing
        """
        pass

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or replace the user's existing vote on the comment.

        Args:
            vote: The vote to save

        Returns:
            The saved vote (created_at kept from an existing vote)
        """
        pass

    @abstractmethod
    async def delete_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> bool:
        """Delete a user's vote on a comment.

        Args:
            comment_id: ID of the comment
            user_id: The user's ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass
