"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from graphreview.domain.service import CommentService, ProfileService
from graphreview.domain.value import CommentId, ReviewId, UserId

from .get_comments import CommentItem, to_comment_item


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    review_id: str  # UUID string
    content: str
    author_id: str  # User ID from authenticated user
    author_name: str  # Display name from authenticated user
    author_email: str = ""
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(CommentItem):
    """Create comment response: the stored comment."""

    pass


class CreateCommentUseCase:
    """Use case for commenting on a review or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            profile_service: Profile domain service
        """
        self.comment_service = comment_service
        self.profile_service = profile_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Make sure the author has a profile (comments reference it)
        2. Create comment via comment service (validates content and parent)

        Args:
            request: Create comment request

        Returns:
            The stored comment

        Raises:
            ValidationError: If content is empty/too long or parent invalid
        """
        author_id = UserId(UUID(request.author_id))
        profile = await self.profile_service.ensure_profile(
            author_id, request.author_name, request.author_email
        )

        comment = await self.comment_service.create_comment(
            review_id=ReviewId(UUID(request.review_id)),
            author_id=author_id,
            content=request.content,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
            author_name=profile.name,
        )

        return CreateCommentResponse(**to_comment_item(comment).model_dump())
