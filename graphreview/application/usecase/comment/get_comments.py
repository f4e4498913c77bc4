"""Get comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from graphreview.domain.model import Comment, nest_comments
from graphreview.domain.service import CommentService, JWTService, VoteService
from graphreview.domain.value import ReviewId, UserId, VoteType


class CommentItem(BaseModel):
    """Comment item in response."""

    id: str
    review_id: str
    parent_id: str | None
    author_id: str
    author_name: str | None
    content: str
    created_at: datetime
    vote_count: int
    current_user_vote: VoteType | None
    replies: list["CommentItem"] = []


def to_comment_item(comment: Comment) -> CommentItem:
    """Convert a comment (and its replies) to a response item."""
    return CommentItem(
        id=str(comment.id),
        review_id=str(comment.review_id),
        parent_id=str(comment.parent_id) if comment.parent_id else None,
        author_id=str(comment.author_id),
        author_name=comment.author_name,
        content=comment.content,
        created_at=comment.created_at,
        vote_count=comment.vote_count,
        current_user_vote=comment.current_user_vote,
        replies=[to_comment_item(reply) for reply in comment.replies],
    )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    review_id: str  # UUID string
    auth_token: str | None = None  # JWT token for vote state (optional)


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    review_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase:
    """Use case for getting the comment thread of a review."""

    def __init__(
        self,
        comment_service: CommentService,
        vote_service: VoteService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            vote_service: Vote service for counts and the caller's votes
            jwt_service: JWT service for decoding auth tokens
        """
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.jwt_service = jwt_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Top-level comments are returned oldest first with their replies
        nested, each carrying its vote count. If authenticated, each comment
        also carries the caller's own vote.

        Args:
            request: Get comments request with review ID and optional auth token

        Returns:
            Nested comments with vote state
        """
        review_id = ReviewId(UUID(request.review_id))
        comments = await self.comment_service.get_comments_for_review(review_id)
        comment_ids = [comment.id for comment in comments]

        counts = await self.vote_service.get_vote_counts(comment_ids)

        user_votes = {}
        user_id = self.jwt_service.get_user_id_from_token(request.auth_token)
        if user_id and comment_ids:
            # Batch query for all votes
            user_votes = await self.vote_service.get_user_votes_for_comments(
                user_id=UserId(UUID(user_id)),
                comment_ids=comment_ids,
            )

        annotated = [
            comment.model_copy(
                update={
                    "vote_count": counts.get(comment.id, 0),
                    "current_user_vote": user_votes.get(comment.id),
                }
            )
            for comment in comments
        ]
        items = [to_comment_item(comment) for comment in nest_comments(annotated)]

        return GetCommentsResponse(
            review_id=request.review_id,
            comments=items,
            total=len(comments),
        )
