"""Remove vote use case."""

from uuid import UUID

from pydantic import BaseModel

from graphreview.domain.service import VoteService
from graphreview.domain.value import CommentId, UserId


class RemoveVoteRequest(BaseModel):
    """Remove vote request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class RemoveVoteResponse(BaseModel):
    """Remove vote response."""

    success: bool
    message: str
    vote_count: int


class RemoveVoteUseCase:
    """Use case for withdrawing a vote from a comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize remove vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: RemoveVoteRequest) -> RemoveVoteResponse:
        """Execute remove vote flow.

        Removing a vote that doesn't exist is not an error.

        Args:
            request: Remove vote request

        Returns:
            Remove vote response with the comment's new vote count
        """
        comment_id = CommentId(UUID(request.comment_id))
        removed = await self.vote_service.remove_vote(
            comment_id, UserId(UUID(request.user_id))
        )
        counts = await self.vote_service.get_vote_counts([comment_id])

        if removed:
            return RemoveVoteResponse(
                success=True,
                message="Vote removed successfully",
                vote_count=counts[comment_id],
            )
        else:
            return RemoveVoteResponse(
                success=False,
                message="No vote found to remove",
                vote_count=counts[comment_id],
            )
