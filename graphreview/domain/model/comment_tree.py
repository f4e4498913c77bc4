"""Comment tree.

Holds the top-level comments of one review, each carrying its replies.
Comments themselves are immutable; the tree swaps whole nodes when a vote
or reply changes one.
"""

from typing import Iterable, Iterator, Optional

from graphreview.domain.model.comment import Comment
from graphreview.domain.value import CommentId


def nest_comments(comments: Iterable[Comment]) -> list[Comment]:
    """Nest a flat list of comments into top-level comments with replies.

    Input order is kept for both levels. Replies whose parent is missing or
    is itself a reply are treated as top-level so nothing is dropped.

    Args:
        comments: Flat comments, e.g. ordered by created_at

    Returns:
        Top-level comments with ``replies`` populated
    """
    comments = list(comments)
    top_level_ids = {c.id for c in comments if c.parent_id is None}

    replies: dict[CommentId, list[Comment]] = {}
    roots: list[Comment] = []
    for comment in comments:
        if comment.parent_id is not None and comment.parent_id in top_level_ids:
            replies.setdefault(comment.parent_id, []).append(
                comment.model_copy(update={"replies": ()})
            )
        else:
            roots.append(comment)

    return [
        root.model_copy(update={"replies": tuple(replies.get(root.id, ()))})
        if root.parent_id is None
        else root.model_copy(update={"replies": ()})
        for root in roots
    ]


class CommentTree:
    """Ordered top-level comments of a review with one level of replies."""

    def __init__(self, comments: Iterable[Comment] = ()) -> None:
        self._comments: list[Comment] = list(comments)

    def __iter__(self) -> Iterator[Comment]:
        return iter(list(self._comments))

    def __len__(self) -> int:
        return len(self._comments)

    @property
    def comments(self) -> list[Comment]:
        """Top-level comments in display order."""
        return list(self._comments)

    def node_count(self) -> int:
        """Number of comments including replies."""
        return sum(1 + len(c.replies) for c in self._comments)

    def reset(self, comments: Iterable[Comment]) -> None:
        """Replace the whole tree, e.g. after a fetch."""
        self._comments = list(comments)

    def find(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a top-level comment or reply by ID."""
        for comment in self._comments:
            if comment.id == comment_id:
                return comment
            for reply in comment.replies:
                if reply.id == comment_id:
                    return reply
        return None

    def prepend(self, comment: Comment) -> None:
        """Insert a new top-level comment at the front."""
        if comment.parent_id is not None:
            raise ValueError("Only top-level comments can be prepended")
        self._comments.insert(0, comment)

    def append_reply(self, reply: Comment) -> bool:
        """Append a reply to its parent's reply list.

        Returns:
            True if the parent was found, False otherwise
        """
        for index, comment in enumerate(self._comments):
            if comment.id == reply.parent_id:
                self._comments[index] = comment.model_copy(
                    update={"replies": (*comment.replies, reply)}
                )
                return True
        return False

    def replace(self, updated: Comment) -> bool:
        """Swap in a new version of a comment, keeping its position.

        Returns:
            True if the comment was found, False otherwise
        """
        for index, comment in enumerate(self._comments):
            if comment.id == updated.id:
                # Replies live on the tree node, not on the caller's copy
                self._comments[index] = updated.model_copy(
                    update={"replies": comment.replies}
                )
                return True
            for reply_index, reply in enumerate(comment.replies):
                if reply.id == updated.id:
                    replies = list(comment.replies)
                    replies[reply_index] = updated
                    self._comments[index] = comment.model_copy(
                        update={"replies": tuple(replies)}
                    )
                    return True
        return False

    def remove(self, comment_id: CommentId) -> bool:
        """Remove a comment.

        Removing a top-level comment drops its replies with it; removing a
        reply only touches its parent's reply list.

        Returns:
            True if something was removed, False otherwise
        """
        for index, comment in enumerate(self._comments):
            if comment.id == comment_id:
                del self._comments[index]
                return True
            remaining = tuple(r for r in comment.replies if r.id != comment_id)
            if len(remaining) != len(comment.replies):
                self._comments[index] = comment.model_copy(
                    update={"replies": remaining}
                )
                return True
        return False
