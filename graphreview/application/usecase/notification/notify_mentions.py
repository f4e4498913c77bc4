"""Notify mentions use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from graphreview.domain.error import NotFoundError
from graphreview.domain.model import UserIdentity
from graphreview.domain.service import (
    CommentService,
    NotificationService,
    ProfileService,
)
from graphreview.domain.value import CommentId, ReviewId, UserId


class NotifyMentionsRequest(BaseModel):
    """Notify mentions request."""

    mentioned_user_ids: list[str]  # UUID strings
    commenter_name: str
    review_id: str  # UUID string
    comment_id: str  # UUID string
    comment_content: str


class NotifyMentionsResponse(BaseModel):
    """Notify mentions response."""

    sent: int


class NotifyMentionsUseCase:
    """Use case for emailing the users mentioned in a comment."""

    def __init__(
        self,
        notification_service: NotificationService,
        comment_service: CommentService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize notify mentions use case.

        Args:
            notification_service: Notification domain service
            comment_service: Comment domain service
            profile_service: Profile domain service for recipient lookup
        """
        self.notification_service = notification_service
        self.comment_service = comment_service
        self.profile_service = profile_service

    async def execute(self, request: NotifyMentionsRequest) -> NotifyMentionsResponse:
        """Execute notify mentions flow.

        Recipients are looked up in the profile directory; unknown IDs are
        skipped and each user is emailed at most once.

        Args:
            request: Notify mentions request

        Returns:
            Number of emails sent

        Raises:
            NotFoundError: If the comment doesn't exist on the review
            NotificationDispatchError: If any email could not be delivered
        """
        review_id = ReviewId(UUID(request.review_id))
        comment_id = CommentId(UUID(request.comment_id))

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if not comment or comment.review_id != review_id:
            raise NotFoundError("Comment", request.comment_id)

        recipients: list[UserIdentity] = []
        seen: set[UserId] = set()
        for raw_id in request.mentioned_user_ids:
            user_id = UserId(UUID(raw_id))
            if user_id in seen:
                continue
            seen.add(user_id)

            profile = await self.profile_service.get_profile(user_id)
            if not profile:
                logfire.warn("Skipping mention of unknown user", user_id=raw_id)
                continue
            recipients.append(profile)

        sent = await self.notification_service.send_mention_notifications(
            mentioned_users=recipients,
            commenter_name=request.commenter_name,
            review_id=review_id,
            comment_id=comment_id,
            comment_content=request.comment_content,
        )
        return NotifyMentionsResponse(sent=sent)
