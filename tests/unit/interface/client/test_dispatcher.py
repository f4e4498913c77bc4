"""Unit tests for NotificationDispatcher."""

from uuid import uuid4

import pytest

from graphreview.domain.value import CommentId, ReviewId
from graphreview.interface.client import NotificationDispatcher
from tests.factories import make_user
from tests.fakes import FakeCommentBackend

REVIEW = ReviewId(uuid4())
JANE = make_user("Jane Doe")
JOHN = make_user("John Smith")


class TestNotificationDispatcher:
    @pytest.mark.asyncio
    async def test_no_mentions_sends_nothing(self):
        backend = FakeCommentBackend()
        dispatcher = NotificationDispatcher(backend)

        task = dispatcher.notify_mentions([], "John Smith", REVIEW, CommentId(uuid4()), "hi")

        assert task is None
        assert dispatcher.pending == 0
        assert backend.calls["dispatch_mention_notification"] == 0

    @pytest.mark.asyncio
    async def test_mentions_sent_in_background(self):
        # Arrange
        backend = FakeCommentBackend()
        gate = backend.hold("dispatch_mention_notification")
        dispatcher = NotificationDispatcher(backend)
        comment_id = CommentId(uuid4())

        # Act
        dispatcher.notify_mentions([JANE], "John Smith", REVIEW, comment_id, "@Jane Doe")

        # Assert
        assert dispatcher.pending == 1
        gate.set()
        await dispatcher.drain()
        assert dispatcher.pending == 0
        [payload] = backend.mention_notifications
        assert payload.mentioned_users == (JANE,)
        assert payload.comment_id == comment_id
        assert payload.commenter_name == "John Smith"

    @pytest.mark.asyncio
    async def test_failures_are_swallowed(self):
        """Delivery failures never reach the caller."""
        # Arrange
        backend = FakeCommentBackend()
        backend.fail("dispatch_reply_notification")
        dispatcher = NotificationDispatcher(backend)

        # Act
        task = dispatcher.notify_reply(
            CommentId(uuid4()), CommentId(uuid4()), REVIEW, "John Smith", "Reply", JOHN.id
        )
        await dispatcher.drain()

        # Assert
        assert task.done()
        assert task.exception() is None
        assert backend.reply_notifications == []

    @pytest.mark.asyncio
    async def test_unexpected_backend_errors_are_logged_not_raised(self):
        # Arrange
        backend = FakeCommentBackend()
        backend.fail("dispatch_mention_notification", error=RuntimeError("boom"))
        dispatcher = NotificationDispatcher(backend)

        # Act
        task = dispatcher.notify_mentions(
            [JANE], "John Smith", REVIEW, CommentId(uuid4()), "@Jane Doe"
        )
        await dispatcher.drain()

        # Assert
        assert task.done()
        assert task.exception() is None
        assert dispatcher.pending == 0
