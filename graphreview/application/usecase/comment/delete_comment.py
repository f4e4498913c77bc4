"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from graphreview.domain.service import CommentService
from graphreview.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted: bool


class DeleteCommentUseCase:
    """Use case for deleting one's own comment together with its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        await self.comment_service.delete_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            user_id=UserId(UUID(request.user_id)),
        )
        return DeleteCommentResponse(comment_id=request.comment_id, deleted=True)
