"""Cast vote use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from graphreview.domain.service import VoteService
from graphreview.domain.value import CommentId, UserId, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    vote_type: VoteType


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    vote_id: str
    comment_id: str
    vote_type: VoteType
    vote_count: int
    created_at: datetime
    updated_at: datetime


class CastVoteUseCase:
    """Use case for voting on a comment or switching an existing vote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Stored vote and the comment's new vote count

        Raises:
            NotFoundError: If the comment doesn't exist
            SelfVoteError: If the user wrote the comment
        """
        comment_id = CommentId(UUID(request.comment_id))
        vote = await self.vote_service.cast_vote(
            comment_id, UserId(UUID(request.user_id)), request.vote_type
        )
        counts = await self.vote_service.get_vote_counts([comment_id])

        return CastVoteResponse(
            vote_id=vote.id,
            comment_id=str(vote.comment_id),
            vote_type=vote.vote_type,
            vote_count=counts[comment_id],
            created_at=vote.created_at,
            updated_at=vote.updated_at,
        )
