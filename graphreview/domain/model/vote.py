"""Vote entity.

Each user holds at most one vote per comment; the vote id is derived from
the (comment, user) pair so a second vote replaces the first.
"""

from datetime import datetime

from pydantic import Field

from graphreview.domain.model.common import DomainModel
from graphreview.domain.value import CommentId, UserId, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per comment (unique constraint on comment_id, user_id)
    - Casting the same type again removes the vote (handled by callers)
    - Users cannot vote on their own comments
    """

    id: VoteId
    comment_id: CommentId
    user_id: UserId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
