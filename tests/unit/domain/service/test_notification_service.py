"""Unit tests for NotificationService."""

from uuid import uuid4

import pytest

from graphreview.domain.error import NotFoundError, NotificationDispatchError
from graphreview.domain.repository import ProfileRepository
from graphreview.domain.service import CommentService, EmailSender, NotificationService
from graphreview.domain.value import CommentId, ReviewId
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestMentionNotifications:
    """Tests for send_mention_notifications method."""

    @pytest.mark.asyncio
    async def test_emails_every_mentioned_user(self, unit_env):
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        email_sender = await unit_env.get(EmailSender)
        jane = make_user("Jane Doe")
        john = make_user("John Smith")
        review_id = ReviewId(uuid4())
        comment_id = CommentId(uuid4())

        # Act
        sent = await notification_service.send_mention_notifications(
            mentioned_users=[jane, john],
            commenter_name="Ada Lovelace",
            review_id=review_id,
            comment_id=comment_id,
            comment_content="@Jane Doe and @John Smith, thoughts?",
        )

        # Assert
        assert sent == 2
        assert {m["to"] for m in email_sender.sent} == {jane.email, john.email}
        message = email_sender.sent[0]
        assert message["subject"] == "Ada Lovelace mentioned you in a comment"
        assert f"/reviews/{review_id}#comment-{comment_id}" in message["html"]

    @pytest.mark.asyncio
    async def test_content_is_html_escaped(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        email_sender = await unit_env.get(EmailSender)

        await notification_service.send_mention_notifications(
            mentioned_users=[make_user("Jane Doe")],
            commenter_name="<b>Mallory</b>",
            review_id=ReviewId(uuid4()),
            comment_id=CommentId(uuid4()),
            comment_content="<script>alert(1)</script>",
        )

        html = email_sender.sent[0]["html"]
        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert "&lt;b&gt;Mallory&lt;/b&gt;" in html

    @pytest.mark.asyncio
    async def test_users_without_email_skipped(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        email_sender = await unit_env.get(EmailSender)

        sent = await notification_service.send_mention_notifications(
            mentioned_users=[make_user("No Mail", email="")],
            commenter_name="Ada Lovelace",
            review_id=ReviewId(uuid4()),
            comment_id=CommentId(uuid4()),
            comment_content="@No Mail hi",
        )

        assert sent == 0
        assert email_sender.sent == []

    @pytest.mark.asyncio
    async def test_partial_failure_raises_after_sending_rest(self, unit_env):
        """One failed delivery doesn't stop the others but is reported."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        email_sender = await unit_env.get(EmailSender)
        jane = make_user("Jane Doe")
        john = make_user("John Smith")
        email_sender.failing_recipients.add(jane.email)

        # Act & Assert
        with pytest.raises(NotificationDispatchError, match="1 of 2"):
            await notification_service.send_mention_notifications(
                mentioned_users=[jane, john],
                commenter_name="Ada Lovelace",
                review_id=ReviewId(uuid4()),
                comment_id=CommentId(uuid4()),
                comment_content="hello",
            )
        assert [m["to"] for m in email_sender.sent] == [john.email]


class TestReplyNotification:
    """Tests for send_reply_notification method."""

    @pytest.mark.asyncio
    async def test_emails_parent_author(self, unit_env):
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        comment_service = await unit_env.get(CommentService)
        profile_repo = await unit_env.get(ProfileRepository)
        email_sender = await unit_env.get(EmailSender)

        author = await profile_repo.save(make_user("Jane Doe"))
        replier = make_user("John Smith")
        review_id = ReviewId(uuid4())
        parent = await comment_service.create_comment(
            review_id=review_id, author_id=author.id, content="Parent"
        )

        # Act
        sent = await notification_service.send_reply_notification(
            parent_comment_id=parent.id,
            reply_comment_id=CommentId(uuid4()),
            review_id=review_id,
            commenter_name=replier.name,
            comment_content="I agree",
            replier_id=replier.id,
        )

        # Assert
        assert sent is True
        assert len(email_sender.sent) == 1
        assert email_sender.sent[0]["to"] == author.email
        assert email_sender.sent[0]["subject"] == (
            "New reply to your comment from John Smith"
        )
        assert "Graph Review" in email_sender.sent[0]["html"]

    @pytest.mark.asyncio
    async def test_no_email_when_replying_to_self(self, unit_env):
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        comment_service = await unit_env.get(CommentService)
        profile_repo = await unit_env.get(ProfileRepository)
        email_sender = await unit_env.get(EmailSender)

        author = await profile_repo.save(make_user("Jane Doe"))
        review_id = ReviewId(uuid4())
        parent = await comment_service.create_comment(
            review_id=review_id, author_id=author.id, content="Parent"
        )

        # Act
        sent = await notification_service.send_reply_notification(
            parent_comment_id=parent.id,
            reply_comment_id=CommentId(uuid4()),
            review_id=review_id,
            commenter_name=author.name,
            comment_content="Following up",
            replier_id=author.id,
        )

        # Assert
        assert sent is False
        assert email_sender.sent == []

    @pytest.mark.asyncio
    async def test_missing_parent_raises(self, unit_env):
        notification_service = await unit_env.get(NotificationService)

        with pytest.raises(NotFoundError):
            await notification_service.send_reply_notification(
                parent_comment_id=CommentId(uuid4()),
                reply_comment_id=CommentId(uuid4()),
                review_id=ReviewId(uuid4()),
                commenter_name="John Smith",
                comment_content="Hello?",
            )
