"""Unit tests for NotifyReplyUseCase."""

from uuid import uuid4

import pytest

from graphreview.application.usecase.notification import (
    NotifyReplyRequest,
    NotifyReplyUseCase,
)
from graphreview.domain.repository import ProfileRepository
from graphreview.domain.service import CommentService, EmailSender
from graphreview.domain.value import ReviewId
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestNotifyReplyUseCase:
    @pytest.mark.asyncio
    async def test_notifies_parent_author(self, unit_env):
        # Arrange
        use_case = await unit_env.get(NotifyReplyUseCase)
        comment_service = await unit_env.get(CommentService)
        profile_repo = await unit_env.get(ProfileRepository)
        email_sender = await unit_env.get(EmailSender)

        author = await profile_repo.save(make_user("Jane Doe"))
        replier = await profile_repo.save(make_user("John Smith"))
        review_id = ReviewId(uuid4())
        parent = await comment_service.create_comment(
            review_id=review_id, author_id=author.id, content="Parent"
        )
        reply = await comment_service.create_comment(
            review_id=review_id,
            author_id=replier.id,
            content="Reply",
            parent_id=parent.id,
        )

        # Act
        response = await use_case.execute(
            NotifyReplyRequest(
                parent_comment_id=str(parent.id),
                reply_comment_id=str(reply.id),
                review_id=str(review_id),
                commenter_name=replier.name,
                comment_content=reply.content,
                user_id=str(replier.id),
            )
        )

        # Assert
        assert response.sent is True
        assert email_sender.sent[0]["to"] == author.email
