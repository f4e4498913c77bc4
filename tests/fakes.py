"""In-memory comment backend for client tests."""

import asyncio
from collections import Counter
from typing import Optional, Sequence
from uuid import uuid4

from graphreview.adapter.error import BackendError
from graphreview.domain.model import Comment, UserIdentity, nest_comments
from graphreview.domain.value import CommentId, ReviewId, UserId, VoteType
from graphreview.interface.client import (
    CommentBackend,
    MentionNotification,
    ReplyNotification,
)


class FakeCommentBackend(CommentBackend):
    """Comment backend keeping state in memory and recording every call.

    ``fail(name)`` makes the named method raise ``BackendError``;
    ``hold(name)`` parks the named method until the returned event is set,
    for observing in-flight state.
    """

    def __init__(self, profiles: Sequence[UserIdentity] = ()) -> None:
        self.profiles = list(profiles)
        self.comments: dict[CommentId, Comment] = {}
        self.votes: dict[tuple[CommentId, UserId], VoteType] = {}
        self.mention_notifications: list[MentionNotification] = []
        self.reply_notifications: list[ReplyNotification] = []
        self.calls: Counter[str] = Counter()
        self._failures: dict[str, BackendError] = {}
        self._gates: dict[str, asyncio.Event] = {}

    def add(self, *comments: Comment) -> None:
        for comment in comments:
            self.comments[comment.id] = comment

    def fail(
        self,
        name: str,
        message: str = "backend unavailable",
        error: Exception | None = None,
    ) -> None:
        self._failures[name] = error or BackendError(message, status_code=503)

    def recover(self, name: str) -> None:
        self._failures.pop(name, None)

    def hold(self, name: str) -> asyncio.Event:
        gate = asyncio.Event()
        self._gates[name] = gate
        return gate

    async def _enter(self, name: str) -> None:
        self.calls[name] += 1
        gate = self._gates.get(name)
        if gate is not None:
            await gate.wait()
        if name in self._failures:
            raise self._failures[name]

    async def list_user_profiles(self) -> Sequence[UserIdentity]:
        await self._enter("list_user_profiles")
        return list(self.profiles)

    async def fetch_comments(
        self, review_id: ReviewId, user: Optional[UserIdentity]
    ) -> Sequence[Comment]:
        await self._enter("fetch_comments")
        counts = Counter(comment_id for comment_id, _ in self.votes)
        flat = sorted(
            (c for c in self.comments.values() if c.review_id == review_id),
            key=lambda c: c.created_at,
        )
        annotated = [
            c.model_copy(
                update={
                    "vote_count": counts.get(c.id, 0),
                    "current_user_vote": self.votes.get((c.id, user.id)) if user else None,
                }
            )
            for c in flat
        ]
        return nest_comments(annotated)

    async def create_comment(
        self,
        review_id: ReviewId,
        content: str,
        author_id: UserId,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        await self._enter("create_comment")
        author = next((p for p in self.profiles if p.id == author_id), None)
        comment = Comment(
            id=CommentId(uuid4()),
            review_id=review_id,
            author_id=author_id,
            author_name=author.name if author else None,
            content=content,
            parent_id=parent_id,
        )
        self.comments[comment.id] = comment
        return comment

    async def delete_comment(self, comment_id: CommentId) -> None:
        await self._enter("delete_comment")
        self.comments.pop(comment_id, None)
        for reply_id in [c.id for c in self.comments.values() if c.parent_id == comment_id]:
            self.comments.pop(reply_id)

    async def cast_vote(
        self, comment_id: CommentId, user_id: UserId, vote_type: VoteType
    ) -> None:
        await self._enter("cast_vote")
        self.votes[(comment_id, user_id)] = vote_type

    async def remove_vote(self, comment_id: CommentId, user_id: UserId) -> None:
        await self._enter("remove_vote")
        self.votes.pop((comment_id, user_id), None)

    async def dispatch_mention_notification(
        self, payload: MentionNotification
    ) -> None:
        await self._enter("dispatch_mention_notification")
        self.mention_notifications.append(payload)

    async def dispatch_reply_notification(self, payload: ReplyNotification) -> None:
        await self._enter("dispatch_reply_notification")
        self.reply_notifications.append(payload)
