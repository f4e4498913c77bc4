"""Comment section controller.

Drives one review's comment section: loading, posting comments and
replies, voting and deleting. Local state only changes after the backend
acknowledges an action; failures become notices and leave state as it was.
"""

import asyncio
from typing import Optional

import logfire

from graphreview.adapter.error import BackendError
from graphreview.domain.error import SelfVoteError
from graphreview.domain.model import Comment, CommentTree, UserIdentity
from graphreview.domain.service.mention import render_mentions
from graphreview.domain.value import (
    CommentId,
    ReviewId,
    SectionState,
    Segment,
    VoteType,
)

from .backend import CommentBackend
from .composer import Composer
from .dispatcher import NotificationDispatcher
from .geometry import TextMeasurer
from .mention_index import MentionIndex
from .notice import Notice, NoticeLevel, NoticeSink
from .session import Session
from .vote_ledger import VoteLedger

SIGN_IN_MESSAGE = "Please sign in"


class CommentSection:
    """Controller for the comments of a single review."""

    def __init__(
        self,
        review_id: ReviewId,
        backend: CommentBackend,
        mention_index: MentionIndex,
        session: Session,
        notices: NoticeSink,
        dispatcher: Optional[NotificationDispatcher] = None,
        measurer: Optional[TextMeasurer] = None,
        max_length: int = 1000,
    ) -> None:
        """Initialize the comment section.

        Args:
            review_id: Review whose comments are shown
            backend: Comment backend
            mention_index: Shared profile directory cache
            session: Source of the signed-in user
            notices: Where user-facing messages go
            dispatcher: Notification dispatcher, one per section by default
            measurer: Text measurer for placing mention suggestions
            max_length: Maximum comment length accepted locally
        """
        self.review_id = review_id
        self.backend = backend
        self.mention_index = mention_index
        self.session = session
        self.notices = notices
        self.dispatcher = dispatcher or NotificationDispatcher(backend)
        self.ledger = VoteLedger(backend)
        self.measurer = measurer
        self.max_length = max_length

        self.state = SectionState.UNINITIALIZED
        self.error: Optional[str] = None
        self.is_mounted = False
        self.tree = CommentTree()
        self.composer = Composer(mention_index, measurer)

        self.is_submitting = False
        self._reply_composers: dict[CommentId, Composer] = {}
        self._replying: set[CommentId] = set()
        self._voting: set[CommentId] = set()
        self._deleting: set[CommentId] = set()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def mount(self) -> None:
        """Load comments and the mention index concurrently.

        Calling ``mount()`` again after an error retries the load.
        """
        self.is_mounted = True
        self.state = SectionState.LOADING
        self.error = None

        with logfire.span("comment_section.mount", review_id=str(self.review_id)):
            comments, users = await asyncio.gather(
                self.backend.fetch_comments(self.review_id, self.session.current_user),
                self.mention_index.load(),
                return_exceptions=True,
            )
            for result in (comments, users):
                # Cancellation is not a load failure
                if isinstance(result, asyncio.CancelledError):
                    raise result

            if not self.is_mounted:
                logfire.info(
                    "Discarding comments loaded after unmount",
                    review_id=str(self.review_id),
                )
                return

            if isinstance(comments, Exception):
                logfire.error(
                    "Failed to load comments",
                    review_id=str(self.review_id),
                    error=str(comments),
                    error_type=type(comments).__name__,
                )
                self.state = SectionState.ERRORED
                self.error = "Failed to load comments"
                self._notify(NoticeLevel.ERROR, self.error)
                return
            if isinstance(users, Exception):
                # Posting works without the directory; mentions just stay plain text
                logfire.error(
                    "Failed to load profile directory",
                    review_id=str(self.review_id),
                    error=str(users),
                    error_type=type(users).__name__,
                )

            self.tree.reset(comments)
            self.state = SectionState.READY
            logfire.info(
                "Comment section ready",
                review_id=str(self.review_id),
                comments=self.tree.node_count(),
            )

    def unmount(self) -> None:
        """Stop applying results of calls still in flight."""
        self.is_mounted = False

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def comments(self) -> list[Comment]:
        return self.tree.comments

    def is_replying(self, parent_id: CommentId) -> bool:
        return parent_id in self._replying

    def is_voting(self, comment_id: CommentId) -> bool:
        return comment_id in self._voting

    def is_deleting(self, comment_id: CommentId) -> bool:
        return comment_id in self._deleting

    def can_delete(self, comment: Comment) -> bool:
        """Only the author sees the delete control."""
        user = self.session.current_user
        return user is not None and comment.author_id == user.id

    def render(self, comment: Comment) -> list[Segment]:
        """Split a comment's content into text and mention-link segments."""
        return render_mentions(comment.content, self.mention_index.users)

    def reply_composer(self, parent_id: CommentId) -> Composer:
        """Composer of the reply box under a top-level comment.

        Raises:
            ValueError: If ``parent_id`` is not a top-level comment here
        """
        parent = self.tree.find(parent_id)
        if parent is None or not parent.is_top_level:
            raise ValueError("Replies can only be added to top-level comments")
        if parent_id not in self._reply_composers:
            self._reply_composers[parent_id] = Composer(
                self.mention_index, self.measurer
            )
        return self._reply_composers[parent_id]

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    async def submit_comment(self) -> Optional[Comment]:
        """Post the main composer's text as a top-level comment.

        Returns:
            The new comment, or None if nothing was posted
        """
        if not self._is_ready("submit_comment") or self.is_submitting:
            return None

        content = self._validate_content(self.composer.text)
        if content is None:
            return None
        user = self._require_user()
        if user is None:
            return None

        self.is_submitting = True
        try:
            with logfire.span(
                "comment_section.submit_comment", review_id=str(self.review_id)
            ):
                comment = await self.backend.create_comment(
                    self.review_id, content, user.id
                )
        except BackendError as e:
            logfire.error("Failed to post comment", error=str(e))
            self._notify(NoticeLevel.ERROR, "Failed to post comment")
            return None
        finally:
            self.is_submitting = False

        # The comment is stored; its emails go out even if the section is gone
        self.dispatcher.notify_mentions(
            self.mention_index.mentioned_in(content),
            user.name,
            self.review_id,
            comment.id,
            comment.content,
        )
        if not self.is_mounted:
            return comment

        comment = comment.model_copy(
            update={"author_name": comment.author_name or user.name, "replies": ()}
        )
        self.tree.prepend(comment)
        self.composer.clear()
        self._notify(NoticeLevel.SUCCESS, "Comment posted")
        return comment

    async def submit_reply(self, parent_id: CommentId) -> Optional[Comment]:
        """Post the reply box's text as a reply to a top-level comment.

        Returns:
            The new reply, or None if nothing was posted

        Raises:
            ValueError: If ``parent_id`` is not a top-level comment here
        """
        if not self._is_ready("submit_reply") or parent_id in self._replying:
            return None

        composer = self.reply_composer(parent_id)
        parent = self.tree.find(parent_id)
        content = self._validate_content(composer.text)
        if content is None or parent is None:
            return None
        user = self._require_user()
        if user is None:
            return None

        self._replying.add(parent_id)
        try:
            with logfire.span(
                "comment_section.submit_reply",
                review_id=str(self.review_id),
                parent_id=str(parent_id),
            ):
                reply = await self.backend.create_comment(
                    self.review_id, content, user.id, parent_id
                )
        except BackendError as e:
            logfire.error("Failed to post reply", parent_id=str(parent_id), error=str(e))
            self._notify(NoticeLevel.ERROR, "Failed to post reply")
            return None
        finally:
            self._replying.discard(parent_id)

        # The reply is stored; its emails go out even if the section is gone
        self.dispatcher.notify_mentions(
            self.mention_index.mentioned_in(content),
            user.name,
            self.review_id,
            reply.id,
            reply.content,
        )
        if parent.author_id != user.id:
            self.dispatcher.notify_reply(
                parent_id,
                reply.id,
                self.review_id,
                user.name,
                reply.content,
                user.id,
            )
        if not self.is_mounted:
            return reply

        reply = reply.model_copy(
            update={"author_name": reply.author_name or user.name, "replies": ()}
        )
        self.tree.append_reply(reply)
        composer.clear()
        self._notify(NoticeLevel.SUCCESS, "Reply posted")
        return reply

    async def vote(
        self, comment_id: CommentId, vote_type: VoteType
    ) -> Optional[Comment]:
        """Vote on a comment; voting the same way twice withdraws the vote.

        Returns:
            The updated comment, or None if nothing changed
        """
        if not self._is_ready("vote") or comment_id in self._voting:
            return None

        comment = self.tree.find(comment_id)
        if comment is None:
            return None
        user = self._require_user()
        if user is None:
            return None

        self._voting.add(comment_id)
        try:
            updated = await self.ledger.cast_vote(comment, user.id, vote_type)
        except SelfVoteError:
            self._notify(NoticeLevel.WARNING, "You cannot vote on your own comment")
            return None
        except BackendError as e:
            logfire.error("Failed to vote", comment_id=str(comment_id), error=str(e))
            self._notify(NoticeLevel.ERROR, "Failed to vote on comment")
            return None
        finally:
            self._voting.discard(comment_id)

        if self.is_mounted:
            self.tree.replace(updated)
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete one of the user's own comments.

        Deleting a top-level comment removes its replies too; deleting a
        reply leaves its parent and siblings in place.

        Returns:
            True if the comment was deleted
        """
        if not self._is_ready("delete") or comment_id in self._deleting:
            return False

        comment = self.tree.find(comment_id)
        if comment is None:
            return False
        user = self._require_user()
        if user is None:
            return False
        if not self.can_delete(comment):
            self._notify(NoticeLevel.WARNING, "You can only delete your own comments")
            return False

        self._deleting.add(comment_id)
        try:
            with logfire.span("comment_section.delete", comment_id=str(comment_id)):
                await self.backend.delete_comment(comment_id)
        except BackendError as e:
            logfire.error(
                "Failed to delete comment", comment_id=str(comment_id), error=str(e)
            )
            self._notify(NoticeLevel.ERROR, "Failed to delete comment")
            return False
        finally:
            self._deleting.discard(comment_id)

        if self.is_mounted:
            self.tree.remove(comment_id)
            self._reply_composers.pop(comment_id, None)
            self._notify(NoticeLevel.SUCCESS, "Comment deleted")
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _is_ready(self, action: str) -> bool:
        if self.state != SectionState.READY:
            logfire.warn(
                "Comment section not ready",
                action=action,
                state=self.state.value,
            )
            return False
        return True

    def _validate_content(self, text: str) -> Optional[str]:
        content = text.strip()
        if not content:
            self._notify(NoticeLevel.WARNING, "Comment cannot be empty")
            return None
        if len(content) > self.max_length:
            self._notify(
                NoticeLevel.WARNING,
                f"Comment must be no more than {self.max_length} characters",
            )
            return None
        return content

    def _require_user(self) -> Optional[UserIdentity]:
        user = self.session.current_user
        if user is None:
            self._notify(NoticeLevel.WARNING, SIGN_IN_MESSAGE)
        return user

    def _notify(self, level: NoticeLevel, message: str) -> None:
        self.notices.push(Notice(level=level, message=message))
