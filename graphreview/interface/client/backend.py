"""Comment backend port.

The comment section talks to its collaborator only through this interface.
``graphreview.adapter.http.HttpCommentBackend`` implements it over the
Graph Review HTTP API.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict

from graphreview.domain.model import Comment, UserIdentity
from graphreview.domain.value import CommentId, ReviewId, UserId, VoteType


class MentionNotification(BaseModel):
    """Payload for emailing the users mentioned in a comment."""

    model_config = ConfigDict(frozen=True)

    mentioned_users: tuple[UserIdentity, ...]
    commenter_name: str
    review_id: ReviewId
    comment_id: CommentId
    comment_content: str


class ReplyNotification(BaseModel):
    """Payload for emailing the author of a replied-to comment."""

    model_config = ConfigDict(frozen=True)

    parent_comment_id: CommentId
    reply_comment_id: CommentId
    review_id: ReviewId
    commenter_name: str
    comment_content: str
    user_id: UserId


class CommentBackend(ABC):
    """Remote operations the comment section depends on.

    Every method raises ``graphreview.adapter.error.BackendError`` when the
    call fails.
    """

    @abstractmethod
    async def list_user_profiles(self) -> Sequence[UserIdentity]:
        """Return the full profile directory."""
        pass

    @abstractmethod
    async def fetch_comments(
        self, review_id: ReviewId, user: Optional[UserIdentity]
    ) -> Sequence[Comment]:
        """Return the review's top-level comments with replies nested.

        Vote state (``current_user_vote``) is computed for ``user``.
        """
        pass

    @abstractmethod
    async def create_comment(
        self,
        review_id: ReviewId,
        content: str,
        author_id: UserId,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Store a new comment or reply and return it as persisted."""
        pass

    @abstractmethod
    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment; its replies go with it."""
        pass

    @abstractmethod
    async def cast_vote(
        self, comment_id: CommentId, user_id: UserId, vote_type: VoteType
    ) -> None:
        """Insert the user's vote or replace its type."""
        pass

    @abstractmethod
    async def remove_vote(self, comment_id: CommentId, user_id: UserId) -> None:
        """Remove the user's vote."""
        pass

    @abstractmethod
    async def dispatch_mention_notification(
        self, payload: MentionNotification
    ) -> None:
        """Ask the server to email mentioned users."""
        pass

    @abstractmethod
    async def dispatch_reply_notification(self, payload: ReplyNotification) -> None:
        """Ask the server to email the parent comment's author."""
        pass
