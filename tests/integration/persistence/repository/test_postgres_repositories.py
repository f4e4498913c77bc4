"""Integration tests for the PostgreSQL repositories.

Require a migrated database (``docker compose up`` then
``python scripts/run_migrations.py``) reachable through ``DATABASE__URL``.
"""

import os
from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from graphreview.domain.model import Comment, Vote
from graphreview.domain.repository import (
    CommentRepository,
    ProfileRepository,
    VoteRepository,
)
from graphreview.domain.value import CommentId, ReviewId, VoteType, make_vote_id
from tests.factories import make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="DATABASE__URL not set"
)

# Integration test fixture - real persistence, assumes postgres running
integration_env = create_env_fixture(unmock={"persistence"})


async def _profile(integration_env, name: str = "Jane Doe"):
    profile_repo = await integration_env.get(ProfileRepository)
    return await profile_repo.save(make_user(f"{name} {uuid4().hex[:6]}"))


def _comment(review_id, author, content, parent_id=None, age_seconds=0) -> Comment:
    return Comment(
        id=CommentId(uuid4()),
        review_id=review_id,
        author_id=author.id,
        author_name=author.name,
        content=content,
        parent_id=parent_id,
        created_at=datetime.now() - timedelta(seconds=age_seconds),
    )


class TestCommentRepositoryIntegration:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find_by_review_oldest_first(self, integration_env):
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        author = await _profile(integration_env)
        review_id = ReviewId(uuid4())
        newer = _comment(review_id, author, "Newer", age_seconds=1)
        older = _comment(review_id, author, "Older", age_seconds=60)

        # Act
        await comment_repo.save(newer)
        await comment_repo.save(older)
        comments = await comment_repo.find_by_review(review_id)

        # Assert
        assert [c.id for c in comments] == [older.id, newer.id]
        assert comments[0].author_id == author.id
        assert comments[0].author_name == author.name

    @pytest.mark.asyncio
    async def test_delete_cascades_to_replies(self, integration_env):
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        author = await _profile(integration_env)
        review_id = ReviewId(uuid4())
        parent = await comment_repo.save(_comment(review_id, author, "Parent"))
        reply = await comment_repo.save(
            _comment(review_id, author, "Reply", parent_id=parent.id)
        )

        # Act
        deleted = await comment_repo.delete(parent.id)

        # Assert
        assert deleted is True
        assert await comment_repo.find_by_id(reply.id) is None
        assert await comment_repo.delete(parent.id) is False

    @pytest.mark.asyncio
    async def test_save_existing_updates_content(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        author = await _profile(integration_env)
        comment = await comment_repo.save(_comment(ReviewId(uuid4()), author, "Draft"))

        await comment_repo.save(comment.model_copy(update={"content": "Final"}))

        found = await comment_repo.find_by_id(comment.id)
        assert found.content == "Final"


class TestVoteRepositoryIntegration:
    """Integration tests for PostgresVoteRepository."""

    @pytest.mark.asyncio
    async def test_upsert_replaces_vote_type(self, integration_env):
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        vote_repo = await integration_env.get(VoteRepository)
        author = await _profile(integration_env)
        voter = await _profile(integration_env, "John Smith")
        comment = await comment_repo.save(_comment(ReviewId(uuid4()), author, "Vote"))

        vote = Vote(
            id=make_vote_id(comment.id, voter.id),
            comment_id=comment.id,
            user_id=voter.id,
            vote_type=VoteType.UP,
        )

        # Act
        await vote_repo.upsert(vote)
        await vote_repo.upsert(vote.model_copy(update={"vote_type": VoteType.DOWN}))

        # Assert
        found = await vote_repo.find_by_comment_and_user(comment.id, voter.id)
        assert found.vote_type == VoteType.DOWN
        assert await vote_repo.count_by_comments([comment.id]) == {comment.id: 1}

    @pytest.mark.asyncio
    async def test_delete_vote(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        vote_repo = await integration_env.get(VoteRepository)
        author = await _profile(integration_env)
        voter = await _profile(integration_env, "John Smith")
        comment = await comment_repo.save(_comment(ReviewId(uuid4()), author, "Vote"))
        await vote_repo.upsert(
            Vote(
                id=make_vote_id(comment.id, voter.id),
                comment_id=comment.id,
                user_id=voter.id,
                vote_type=VoteType.UP,
            )
        )

        assert await vote_repo.delete_by_comment_and_user(comment.id, voter.id) is True
        assert await vote_repo.delete_by_comment_and_user(comment.id, voter.id) is False
        assert await vote_repo.count_by_comments([comment.id]) == {}


class TestProfileRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_save_is_upsert(self, integration_env):
        profile_repo = await integration_env.get(ProfileRepository)
        profile = await _profile(integration_env)

        await profile_repo.save(profile.model_copy(update={"email": "new@example.com"}))

        found = await profile_repo.find_by_id(profile.id)
        assert found.email == "new@example.com"
