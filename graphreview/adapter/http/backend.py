"""HTTP client for the Graph Review comments API.

Implements the comment section's backend port on top of httpx. The signed-in
user is identified by the ``auth_token`` cookie; the server derives author
and voter IDs from it.
"""

from typing import Any, Optional, Sequence

import httpx
import logfire
from pydantic import ValidationError

from graphreview.adapter.error import NetworkError, ServerError
from graphreview.config import ClientSettings
from graphreview.domain.model import Comment, UserIdentity
from graphreview.domain.value import CommentId, ReviewId, UserId, VoteType
from graphreview.interface.client.backend import (
    CommentBackend,
    MentionNotification,
    ReplyNotification,
)


class HttpCommentBackend(CommentBackend):
    """Comment backend talking to the API over HTTP."""

    def __init__(
        self,
        base_url: str,
        auth_token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize HTTP backend.

        Args:
            base_url: API base URL, e.g. ``http://localhost:8000``
            auth_token: JWT of the signed-in user, sent as the auth cookie
            transport: Custom transport (e.g. ``httpx.ASGITransport`` in tests)
            timeout: Request timeout in seconds
        """
        cookies = {"auth_token": auth_token} if auth_token else None
        self._client = httpx.AsyncClient(
            base_url=base_url,
            cookies=cookies,
            transport=transport,
            timeout=timeout,
        )

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        auth_token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "HttpCommentBackend":
        """Build a backend pointed at the configured API."""
        return cls(
            base_url=settings.api_base_url,
            auth_token=auth_token,
            transport=transport,
            timeout=settings.timeout_seconds,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpCommentBackend":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        """Send a request and decode the JSON body.

        Raises:
            NetworkError: If the API could not be reached
            ServerError: If the API answered with an error status or a body
                that is not JSON
        """
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logfire.error("Comment API unreachable", method=method, url=url, error=str(e))
            raise NetworkError(f"Could not reach comment API: {e}")

        if response.status_code >= 400:
            try:
                detail = str(response.json().get("detail", ""))
            except (ValueError, AttributeError):
                detail = response.text
            logfire.warn(
                "Comment API error",
                method=method,
                url=url,
                status_code=response.status_code,
                detail=detail,
            )
            raise ServerError(
                f"{method} {url} failed with {response.status_code}: {detail}",
                status_code=response.status_code,
                detail=detail,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise self._malformed(method, url, e, response.status_code)

    def _malformed(
        self, method: str, url: str, error: Exception, status_code: int = 502
    ) -> ServerError:
        """Error for a reply the API sent but we cannot read.

        Proxies answering with an HTML page end up here, as do bodies that
        no longer match our models.
        """
        logfire.error(
            "Malformed comment API response",
            method=method,
            url=url,
            error=str(error),
            error_type=type(error).__name__,
        )
        return ServerError(
            f"{method} {url} returned a malformed body: {error}",
            status_code=status_code,
            detail="malformed response",
        )

    async def list_user_profiles(self) -> Sequence[UserIdentity]:
        data = await self._request("GET", "/profiles")
        try:
            return [UserIdentity.model_validate(item) for item in data["profiles"]]
        except (KeyError, TypeError, ValidationError) as e:
            raise self._malformed("GET", "/profiles", e)

    async def fetch_comments(
        self, review_id: ReviewId, user: Optional[UserIdentity]
    ) -> Sequence[Comment]:
        # Vote state follows the auth cookie; ``user`` is implied by it
        url = f"/reviews/{review_id}/comments"
        data = await self._request("GET", url)
        try:
            return [Comment.model_validate(item) for item in data["comments"]]
        except (KeyError, TypeError, ValidationError) as e:
            raise self._malformed("GET", url, e)

    async def create_comment(
        self,
        review_id: ReviewId,
        content: str,
        author_id: UserId,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        data = await self._request(
            "POST",
            f"/reviews/{review_id}/comments",
            json={
                "content": content,
                "parent_id": str(parent_id) if parent_id else None,
            },
        )
        try:
            return Comment.model_validate(data)
        except ValidationError as e:
            raise self._malformed("POST", f"/reviews/{review_id}/comments", e)

    async def delete_comment(self, comment_id: CommentId) -> None:
        await self._request("DELETE", f"/comments/{comment_id}")

    async def cast_vote(
        self, comment_id: CommentId, user_id: UserId, vote_type: VoteType
    ) -> None:
        await self._request(
            "PUT",
            f"/comments/{comment_id}/vote",
            json={"vote_type": vote_type.value},
        )

    async def remove_vote(self, comment_id: CommentId, user_id: UserId) -> None:
        await self._request("DELETE", f"/comments/{comment_id}/vote")

    async def dispatch_mention_notification(
        self, payload: MentionNotification
    ) -> None:
        await self._request(
            "POST",
            "/notifications/mention",
            json={
                "mentioned_user_ids": [str(u.id) for u in payload.mentioned_users],
                "commenter_name": payload.commenter_name,
                "review_id": str(payload.review_id),
                "comment_id": str(payload.comment_id),
                "comment_content": payload.comment_content,
            },
        )

    async def dispatch_reply_notification(self, payload: ReplyNotification) -> None:
        await self._request(
            "POST",
            "/notifications/reply",
            json={
                "parent_comment_id": str(payload.parent_comment_id),
                "reply_comment_id": str(payload.reply_comment_id),
                "review_id": str(payload.review_id),
                "commenter_name": payload.commenter_name,
                "comment_content": payload.comment_content,
            },
        )
