"""Notify reply use case."""

from uuid import UUID

from pydantic import BaseModel

from graphreview.domain.service import NotificationService
from graphreview.domain.value import CommentId, ReviewId, UserId


class NotifyReplyRequest(BaseModel):
    """Notify reply request."""

    parent_comment_id: str  # UUID string
    reply_comment_id: str  # UUID string
    review_id: str  # UUID string
    commenter_name: str
    comment_content: str
    user_id: str  # Reply author from authenticated user


class NotifyReplyResponse(BaseModel):
    """Notify reply response."""

    sent: bool


class NotifyReplyUseCase:
    """Use case for emailing a comment's author about a new reply."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: NotifyReplyRequest) -> NotifyReplyResponse:
        """Execute notify reply flow.

        No email goes out when the author replied to themselves.

        Raises:
            NotFoundError: If the parent comment doesn't exist
            NotificationDispatchError: If delivery fails
        """
        sent = await self.notification_service.send_reply_notification(
            parent_comment_id=CommentId(UUID(request.parent_comment_id)),
            reply_comment_id=CommentId(UUID(request.reply_comment_id)),
            review_id=ReviewId(UUID(request.review_id)),
            commenter_name=request.commenter_name,
            comment_content=request.comment_content,
            replier_id=UserId(UUID(request.user_id)),
        )
        return NotifyReplyResponse(sent=sent)
