"""Vote domain service."""

from datetime import datetime

import logfire

from graphreview.domain.error import NotFoundError, SelfVoteError
from graphreview.domain.model.vote import Vote
from graphreview.domain.repository import VoteRepository
from graphreview.domain.value import CommentId, UserId, VoteType, make_vote_id

from .base import Service
from .comment_service import CommentService


class VoteService(Service):
    """Domain service for comment votes."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        comment_service: CommentService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            comment_service: Comment domain service
        """
        self.vote_repository = vote_repository
        self.comment_service = comment_service

    async def cast_vote(
        self, comment_id: CommentId, user_id: UserId, vote_type: VoteType
    ) -> Vote:
        """Cast a vote, replacing any vote the user already holds.

        Args:
            comment_id: Comment ID
            user_id: User ID
            vote_type: Up or down

        Returns:
            The stored vote

        Raises:
            NotFoundError: If the comment doesn't exist
            SelfVoteError: If the user authored the comment
        """
        with logfire.span(
            "vote_service.cast_vote",
            comment_id=str(comment_id),
            user_id=str(user_id),
            vote_type=vote_type.value,
        ):
            comment = await self.comment_service.get_comment_by_id(comment_id)
            if not comment:
                raise NotFoundError("Comment", str(comment_id))
            if comment.author_id == user_id:
                logfire.warn(
                    "Self vote attempt", comment_id=str(comment_id), user_id=str(user_id)
                )
                raise SelfVoteError(str(comment_id), str(user_id))

            now = datetime.now()
            vote = Vote(
                id=make_vote_id(comment_id, user_id),
                comment_id=comment_id,
                user_id=user_id,
                vote_type=vote_type,
                created_at=now,
                updated_at=now,
            )
            saved = await self.vote_repository.upsert(vote)
            logfire.info(
                "Vote cast",
                comment_id=str(comment_id),
                user_id=str(user_id),
                vote_type=vote_type.value,
            )
            return saved

    async def remove_vote(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Remove the user's vote from a comment.

        Args:
            comment_id: Comment ID
            user_id: User ID

        Returns:
            True if a vote was removed, False if no vote existed
        """
        with logfire.span(
            "vote_service.remove_vote", comment_id=str(comment_id), user_id=str(user_id)
        ):
            deleted = await self.vote_repository.delete_by_comment_and_user(
                comment_id=comment_id, user_id=user_id
            )
            if deleted:
                logfire.info(
                    "Vote removed", comment_id=str(comment_id), user_id=str(user_id)
                )
            else:
                logfire.info(
                    "No vote to remove", comment_id=str(comment_id), user_id=str(user_id)
                )
            return deleted

    async def get_vote_counts(
        self, comment_ids: list[CommentId]
    ) -> dict[CommentId, int]:
        """Count votes on each comment.

        Args:
            comment_ids: Comment IDs

        Returns:
            Mapping of every requested comment ID to its vote count
        """
        if not comment_ids:
            return {}

        counts = await self.vote_repository.count_by_comments(comment_ids)
        return {cid: counts.get(cid, 0) for cid in comment_ids}

    async def get_user_votes_for_comments(
        self, user_id: UserId, comment_ids: list[CommentId]
    ) -> dict[CommentId, VoteType]:
        """Look up the user's vote on each comment.

        Args:
            user_id: User ID
            comment_ids: Comment IDs to check

        Returns:
            Mapping of comment ID to vote type, only for comments the user voted on
        """
        if not comment_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_user_and_comments(
            user_id=user_id, comment_ids=comment_ids
        )
        return {vote.comment_id: vote.vote_type for vote in votes}
