"""Domain value objects for Graph Review."""

from graphreview.domain.value.identifiers import (
    CommentId,
    ReviewId,
    UserId,
    VoteId,
    make_vote_id,
)
from graphreview.domain.value.types import (
    MentionQuery,
    Point,
    SectionState,
    Segment,
    SegmentType,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "ReviewId",
    "CommentId",
    "VoteId",
    "make_vote_id",
    # Types
    "VoteType",
    "SectionState",
    "SegmentType",
    "MentionQuery",
    "Segment",
    "Point",
]
