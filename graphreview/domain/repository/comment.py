"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from graphreview.domain.model.comment import Comment
from graphreview.domain.value import CommentId, ReviewId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_review(self, review_id: ReviewId) -> List[Comment]:
        """Find all comments and replies of a review, flat.

        Comments are returned ascending by created_at.

        Args:
            review_id: The review ID

        Returns:
            List of comments, oldest first
        """
        pass

    @abstractmethod
    async def find_replies(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment, oldest first.

        Args:
            parent_id: The parent comment ID

        Returns:
            List of replies
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Hard delete a comment together with its replies and votes.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was deleted, False if none existed
        """
        pass
