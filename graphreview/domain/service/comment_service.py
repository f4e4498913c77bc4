"""Comment domain service."""

import logfire
from datetime import datetime
from uuid import uuid4

from graphreview.config import CommentSettings
from graphreview.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from graphreview.domain.model.comment import Comment
from graphreview.domain.repository import CommentRepository
from graphreview.domain.value import CommentId, ReviewId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            comment_settings: Comment limits
        """
        self.comment_repository = comment_repository
        self.comment_settings = comment_settings

    async def create_comment(
        self,
        review_id: ReviewId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
        author_name: str | None = None,
    ) -> Comment:
        """Create a comment on a review or a reply to a top-level comment.

        Args:
            review_id: Review ID
            author_id: Author user ID
            content: Comment text, mentions embedded as "@Name"
            parent_id: Parent comment ID for replies (None for top-level)
            author_name: Author display name, denormalized for rendering

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty/too long or parent invalid
        """
        with logfire.span(
            "comment_service.create_comment",
            review_id=str(review_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            content = content.strip()
            if not content:
                raise ValidationError("Comment cannot be empty")
            if len(content) > self.comment_settings.max_length:
                raise ValidationError(
                    f"Comment must be no more than {self.comment_settings.max_length} characters"
                )

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        review_id=str(review_id),
                    )
                    raise ValidationError("Parent comment not found")
                if parent.review_id != review_id:
                    logfire.warn(
                        "Parent comment does not belong to review",
                        parent_id=str(parent_id),
                        parent_review_id=str(parent.review_id),
                        target_review_id=str(review_id),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this review"
                    )
                if not parent.is_top_level:
                    raise ValidationError("Replies can only be added to top-level comments")

            comment = Comment(
                id=CommentId(uuid4()),
                review_id=review_id,
                author_id=author_id,
                author_name=author_name,
                content=content,
                parent_id=parent_id,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                review_id=str(review_id),
                is_reply=parent_id is not None,
            )
            return saved

    async def get_comments_for_review(self, review_id: ReviewId) -> list[Comment]:
        """Get all comments and replies of a review, oldest first.

        Args:
            review_id: Review ID

        Returns:
            Flat list of comments
        """
        with logfire.span(
            "comment_service.get_comments_for_review", review_id=str(review_id)
        ):
            comments = await self.comment_repository.find_by_review(review_id)
            logfire.info(
                "Comments retrieved for review",
                review_id=str(review_id),
                count=len(comments),
            )
            return comments

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> None:
        """Delete a comment owned by the user.

        Replies and votes go with it.

        Args:
            comment_id: Comment ID
            user_id: ID of the user requesting the delete

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                raise NotFoundError("Comment", str(comment_id))
            if comment.author_id != user_id:
                raise NotAuthorizedError("comment", str(comment_id), str(user_id))

            await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                review_id=str(comment.review_id),
                was_reply=comment.parent_id is not None,
            )
