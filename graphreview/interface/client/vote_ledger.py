"""Vote ledger: vote state transitions for the current user."""

import logfire

from graphreview.domain.error import SelfVoteError
from graphreview.domain.model import Comment
from graphreview.domain.value import UserId, VoteType

from .backend import CommentBackend


class VoteLedger:
    """Applies the current user's votes to comments.

    Transitions, applied only once the backend call succeeds:

    - no vote -> vote: count + 1
    - vote -> same type: vote removed, count - 1
    - vote -> other type: vote switched, count unchanged

    The count therefore tracks how many users voted at all, not up minus
    down.
    """

    def __init__(self, backend: CommentBackend) -> None:
        self._backend = backend

    async def cast_vote(
        self, comment: Comment, user_id: UserId, vote_type: VoteType
    ) -> Comment:
        """Vote on a comment, toggling off a repeated vote.

        Args:
            comment: Comment as currently shown
            user_id: Voting user
            vote_type: Up or down

        Returns:
            The comment with updated ``vote_count`` and ``current_user_vote``

        Raises:
            SelfVoteError: If the user wrote the comment; no backend call is made
            BackendError: If the backend call fails
        """
        if comment.author_id == user_id:
            raise SelfVoteError(str(comment.id), str(user_id))

        if comment.current_user_vote == vote_type:
            return await self.remove_vote(comment, user_id)

        with logfire.span(
            "vote_ledger.cast_vote",
            comment_id=str(comment.id),
            vote_type=vote_type.value,
        ):
            await self._backend.cast_vote(comment.id, user_id, vote_type)

        delta = 0 if comment.current_user_vote else 1
        return comment.model_copy(
            update={
                "vote_count": comment.vote_count + delta,
                "current_user_vote": vote_type,
            }
        )

    async def remove_vote(self, comment: Comment, user_id: UserId) -> Comment:
        """Withdraw the user's vote on a comment.

        Raises:
            SelfVoteError: If the user wrote the comment
            BackendError: If the backend call fails
        """
        if comment.author_id == user_id:
            raise SelfVoteError(str(comment.id), str(user_id))

        with logfire.span("vote_ledger.remove_vote", comment_id=str(comment.id)):
            await self._backend.remove_vote(comment.id, user_id)

        if comment.current_user_vote is None:
            return comment
        return comment.model_copy(
            update={
                "vote_count": max(0, comment.vote_count - 1),
                "current_user_vote": None,
            }
        )
