"""Notification domain service.

Sends the emails behind @-mentions and replies. Delivery itself goes through
an ``EmailSender`` implemented in the adapter layer.
"""

import asyncio
from html import escape

import logfire

from graphreview.config import NotificationSettings
from graphreview.domain.error import NotFoundError, NotificationDispatchError
from graphreview.domain.model.user_identity import UserIdentity
from graphreview.domain.value import CommentId, ReviewId, UserId

from .base import Service
from .comment_service import CommentService
from .profile_service import ProfileService


class EmailSender:
    """Generic email delivery interface."""

    async def send(self, to: str, subject: str, html: str) -> None:
        """Deliver one email.

        Args:
            to: Recipient address
            subject: Subject line
            html: HTML body

        Raises:
            NotificationDispatchError: If delivery fails
        """
        raise NotImplementedError


class NotificationService(Service):
    """Domain service for mention and reply notifications."""

    def __init__(
        self,
        email_sender: EmailSender,
        comment_service: CommentService,
        profile_service: ProfileService,
        notification_settings: NotificationSettings,
    ) -> None:
        """Initialize notification service.

        Args:
            email_sender: Email delivery adapter
            comment_service: Comment domain service
            profile_service: Profile domain service
            notification_settings: Link and sender configuration
        """
        self.email_sender = email_sender
        self.comment_service = comment_service
        self.profile_service = profile_service
        self.settings = notification_settings

    def comment_url(self, review_id: ReviewId, comment_id: CommentId) -> str:
        """Link to a comment inside the review page."""
        base = self.settings.app_url.rstrip("/")
        return f"{base}/reviews/{review_id}#comment-{comment_id}"

    async def send_mention_notifications(
        self,
        mentioned_users: list[UserIdentity],
        commenter_name: str,
        review_id: ReviewId,
        comment_id: CommentId,
        comment_content: str,
    ) -> int:
        """Email every mentioned user.

        Args:
            mentioned_users: Users mentioned in the comment
            commenter_name: Display name of the comment author
            review_id: Review the comment belongs to
            comment_id: The comment
            comment_content: Comment text quoted in the email

        Returns:
            Number of emails sent

        Raises:
            NotificationDispatchError: If any email could not be delivered
        """
        with logfire.span(
            "notification_service.send_mention_notifications",
            review_id=str(review_id),
            comment_id=str(comment_id),
            recipients=len(mentioned_users),
        ):
            recipients = [u for u in mentioned_users if u.email]
            url = self.comment_url(review_id, comment_id)
            subject = f"{commenter_name} mentioned you in a comment"

            results = await asyncio.gather(
                *(
                    self.email_sender.send(
                        to=user.email,
                        subject=subject,
                        html=(
                            f"<p>Hi {escape(user.name)},</p>"
                            f"<p><strong>{escape(commenter_name)}</strong> mentioned you in a comment:</p>"
                            f"<blockquote>{escape(comment_content)}</blockquote>"
                            f'<p><a href="{escape(url)}">View the comment</a></p>'
                        ),
                    )
                    for user in recipients
                ),
                return_exceptions=True,
            )

            failed = [
                (user.email, result)
                for user, result in zip(recipients, results)
                if isinstance(result, Exception)
            ]
            for email, error in failed:
                logfire.error(
                    "Mention notification failed", recipient=email, error=str(error)
                )
            if failed:
                raise NotificationDispatchError(
                    f"Failed to notify {len(failed)} of {len(recipients)} mentioned users"
                )

            logfire.info(
                "Mention notifications sent",
                comment_id=str(comment_id),
                recipients=[u.email for u in recipients],
            )
            return len(recipients)

    async def send_reply_notification(
        self,
        parent_comment_id: CommentId,
        reply_comment_id: CommentId,
        review_id: ReviewId,
        commenter_name: str,
        comment_content: str,
        replier_id: UserId | None = None,
    ) -> bool:
        """Email the author of the parent comment about a new reply.

        Args:
            parent_comment_id: Comment that was replied to
            reply_comment_id: The new reply
            review_id: Review both comments belong to
            commenter_name: Display name of the reply author
            comment_content: Reply text quoted in the email
            replier_id: Reply author; no email is sent to oneself

        Returns:
            True if an email was sent, False if none was needed

        Raises:
            NotFoundError: If the parent comment doesn't exist
            NotificationDispatchError: If delivery fails
        """
        with logfire.span(
            "notification_service.send_reply_notification",
            parent_comment_id=str(parent_comment_id),
            reply_comment_id=str(reply_comment_id),
        ):
            parent = await self.comment_service.get_comment_by_id(parent_comment_id)
            if not parent:
                raise NotFoundError("Comment", str(parent_comment_id))

            if replier_id is not None and parent.author_id == replier_id:
                logfire.info("Skipping reply notification - same user")
                return False

            author = await self.profile_service.get_profile(parent.author_id)
            if not author or not author.email:
                logfire.warn(
                    "Parent comment author has no email",
                    author_id=str(parent.author_id),
                )
                return False

            url = self.comment_url(review_id, reply_comment_id)
            await self.email_sender.send(
                to=author.email,
                subject=f"New reply to your comment from {commenter_name}",
                html=(
                    "<h1>New Reply to Your Comment</h1>"
                    f"<p>Hello {escape(author.name)},</p>"
                    f"<p><strong>{escape(commenter_name)}</strong> has replied to your comment:</p>"
                    f"<blockquote>{escape(comment_content)}</blockquote>"
                    f'<p><a href="{escape(url)}">View Reply</a></p>'
                    f"<p>Thank you,<br>{escape(self.settings.product_name)}</p>"
                ),
            )
            logfire.info("Reply notification sent", recipient=author.email)
            return True
