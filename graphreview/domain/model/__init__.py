"""Domain model entities for Graph Review."""

from graphreview.domain.model.comment import Comment
from graphreview.domain.model.comment_tree import CommentTree, nest_comments
from graphreview.domain.model.user_identity import UserIdentity
from graphreview.domain.model.vote import Vote

__all__ = [
    "UserIdentity",
    "Comment",
    "CommentTree",
    "Vote",
    "nest_comments",
]
