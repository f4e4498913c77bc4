"""Unit tests for VoteLedger."""

from uuid import uuid4

import pytest

from graphreview.adapter.error import BackendError
from graphreview.domain.error import SelfVoteError
from graphreview.domain.value import ReviewId, VoteType
from graphreview.interface.client import VoteLedger
from tests.factories import make_comment, make_user
from tests.fakes import FakeCommentBackend

REVIEW = ReviewId(uuid4())
AUTHOR = make_user("Jane Doe")
VOTER = make_user("John Smith")


class TestVoteLedger:
    """Vote transitions as seen by the current user."""

    @pytest.mark.asyncio
    async def test_vote_then_repeat_toggles_off(self):
        # Arrange
        backend = FakeCommentBackend()
        ledger = VoteLedger(backend)
        comment = make_comment(REVIEW, AUTHOR, vote_count=3)

        # Act
        voted = await ledger.cast_vote(comment, VOTER.id, VoteType.UP)
        unvoted = await ledger.cast_vote(voted, VOTER.id, VoteType.UP)

        # Assert
        assert (voted.vote_count, voted.current_user_vote) == (4, VoteType.UP)
        assert (unvoted.vote_count, unvoted.current_user_vote) == (3, None)
        assert backend.calls["cast_vote"] == 1
        assert backend.calls["remove_vote"] == 1
        assert backend.votes == {}

    @pytest.mark.asyncio
    async def test_switching_type_keeps_count(self):
        # Arrange
        backend = FakeCommentBackend()
        ledger = VoteLedger(backend)
        comment = make_comment(REVIEW, AUTHOR, vote_count=4, current_user_vote=VoteType.UP)

        # Act
        switched = await ledger.cast_vote(comment, VOTER.id, VoteType.DOWN)

        # Assert
        assert switched.vote_count == 4
        assert switched.current_user_vote == VoteType.DOWN
        assert backend.votes == {(comment.id, VOTER.id): VoteType.DOWN}

    @pytest.mark.asyncio
    async def test_self_vote_makes_no_backend_call(self):
        # Arrange
        backend = FakeCommentBackend()
        ledger = VoteLedger(backend)
        comment = make_comment(REVIEW, AUTHOR)

        # Act & Assert
        with pytest.raises(SelfVoteError):
            await ledger.cast_vote(comment, AUTHOR.id, VoteType.UP)
        with pytest.raises(SelfVoteError):
            await ledger.remove_vote(comment, AUTHOR.id)
        assert sum(backend.calls.values()) == 0

    @pytest.mark.asyncio
    async def test_backend_failure_propagates(self):
        # Arrange
        backend = FakeCommentBackend()
        backend.fail("cast_vote")
        ledger = VoteLedger(backend)
        comment = make_comment(REVIEW, AUTHOR, vote_count=2)

        # Act & Assert
        with pytest.raises(BackendError):
            await ledger.cast_vote(comment, VOTER.id, VoteType.UP)
        assert comment.vote_count == 2

    @pytest.mark.asyncio
    async def test_remove_without_vote_keeps_count(self):
        ledger = VoteLedger(FakeCommentBackend())
        comment = make_comment(REVIEW, AUTHOR, vote_count=0)

        result = await ledger.remove_vote(comment, VOTER.id)

        assert result.vote_count == 0
        assert result.current_user_vote is None
