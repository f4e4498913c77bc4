"""Fire-and-forget notification dispatch."""

import asyncio
from typing import Awaitable, Optional, Sequence

import logfire

from graphreview.adapter.error import BackendError
from graphreview.domain.model import UserIdentity
from graphreview.domain.value import CommentId, ReviewId, UserId

from .backend import CommentBackend, MentionNotification, ReplyNotification


class NotificationDispatcher:
    """Sends notification requests in the background.

    Callers never wait for delivery and never see its failures; those are
    logged. ``drain()`` waits for whatever is still in flight.
    """

    def __init__(self, backend: CommentBackend) -> None:
        self._backend = backend
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def notify_mentions(
        self,
        mentioned_users: Sequence[UserIdentity],
        commenter_name: str,
        review_id: ReviewId,
        comment_id: CommentId,
        comment_content: str,
    ) -> Optional[asyncio.Task]:
        """Schedule mention emails; nothing is sent without mentioned users."""
        if not mentioned_users:
            return None

        payload = MentionNotification(
            mentioned_users=tuple(mentioned_users),
            commenter_name=commenter_name,
            review_id=review_id,
            comment_id=comment_id,
            comment_content=comment_content,
        )
        return self._spawn(
            self._backend.dispatch_mention_notification(payload),
            kind="mention",
            comment_id=comment_id,
        )

    def notify_reply(
        self,
        parent_comment_id: CommentId,
        reply_comment_id: CommentId,
        review_id: ReviewId,
        commenter_name: str,
        comment_content: str,
        user_id: UserId,
    ) -> asyncio.Task:
        """Schedule the email telling a comment's author about a reply."""
        payload = ReplyNotification(
            parent_comment_id=parent_comment_id,
            reply_comment_id=reply_comment_id,
            review_id=review_id,
            commenter_name=commenter_name,
            comment_content=comment_content,
            user_id=user_id,
        )
        return self._spawn(
            self._backend.dispatch_reply_notification(payload),
            kind="reply",
            comment_id=reply_comment_id,
        )

    async def drain(self) -> None:
        """Wait for all scheduled notifications to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def _spawn(
        self, call: Awaitable[None], kind: str, comment_id: CommentId
    ) -> asyncio.Task:
        task = asyncio.create_task(self._run(call, kind, comment_id))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(
        self, call: Awaitable[None], kind: str, comment_id: CommentId
    ) -> None:
        try:
            await call
        except BackendError as e:
            logfire.error(
                "Notification dispatch failed",
                kind=kind,
                comment_id=str(comment_id),
                error=str(e),
            )
            return
        except Exception as e:
            # A misbehaving backend must not leave an unretrieved task error
            logfire.exception(
                "Notification dispatch crashed",
                kind=kind,
                comment_id=str(comment_id),
                error_type=type(e).__name__,
            )
            return
        logfire.info("Notification dispatched", kind=kind, comment_id=str(comment_id))
