"""Unit tests for DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from graphreview.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from graphreview.domain.error import NotAuthorizedError
from graphreview.domain.service import CommentService
from graphreview.domain.value import ReviewId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    @pytest.mark.asyncio
    async def test_author_deletes_comment(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        author_id = UserId(uuid4())
        comment = await comment_service.create_comment(
            review_id=ReviewId(uuid4()), author_id=author_id, content="Oops"
        )

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(comment_id=str(comment.id), user_id=str(author_id))
        )

        # Assert
        assert response.deleted is True
        assert await comment_service.get_comment_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(
            review_id=ReviewId(uuid4()), author_id=UserId(uuid4()), content="Mine"
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(comment.id), user_id=str(uuid4()))
            )
