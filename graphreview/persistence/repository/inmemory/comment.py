"""In-memory comment repository for testing."""

from typing import Optional

from graphreview.domain.model.comment import Comment
from graphreview.domain.repository.comment import CommentRepository
from graphreview.domain.value import CommentId, ReviewId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_review(self, review_id: ReviewId) -> list[Comment]:
        """Find all comments of a review, oldest first."""
        comments = [c for c in self._comments.values() if c.review_id == review_id]
        # Stable sort keeps insertion order for equal timestamps
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_replies(self, parent_id: CommentId) -> list[Comment]:
        """Find direct replies of a comment, oldest first."""
        replies = [c for c in self._comments.values() if c.parent_id == parent_id]
        replies.sort(key=lambda c: c.created_at)
        return replies

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment and, like the database cascade, its replies."""
        if comment_id not in self._comments:
            return False

        del self._comments[comment_id]
        for reply_id in [
            c.id for c in self._comments.values() if c.parent_id == comment_id
        ]:
            await self.delete(reply_id)
        return True
