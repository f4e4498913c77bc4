"""Strongly typed identifiers for Graph Review domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
ReviewId = NewType("ReviewId", UUID)
CommentId = NewType("CommentId", UUID)

# Votes are keyed by "<comment_id>-<user_id>" so there is at most one per user per comment
VoteId = NewType("VoteId", str)


def make_vote_id(comment_id: CommentId, user_id: UserId) -> VoteId:
    """Derive the vote identifier for a (comment, user) pair."""
    return VoteId(f"{comment_id}-{user_id}")
