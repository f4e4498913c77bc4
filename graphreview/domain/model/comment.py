"""Comment entity.

Comments are attached to a review. A comment is either top-level
(``parent_id`` is None) or a reply to a top-level comment; threads are
never deeper than that.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from graphreview.domain.model.common import DomainModel
from graphreview.domain.value import CommentId, ReviewId, UserId, VoteType


class Comment(DomainModel):
    """Comment entity.

    ``vote_count`` and ``current_user_vote`` are read-side values: the number
    of votes cast on the comment and the viewing user's own vote, if any.
    ``replies`` is only populated on top-level comments.
    """

    id: CommentId
    review_id: ReviewId
    author_id: UserId
    author_name: Optional[str] = None
    content: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    vote_count: int = Field(default=0, ge=0)
    current_user_vote: Optional[VoteType] = None
    replies: tuple["Comment", ...] = ()

    @property
    def is_top_level(self) -> bool:
        """Whether this comment is attached directly to the review."""
        return self.parent_id is None
