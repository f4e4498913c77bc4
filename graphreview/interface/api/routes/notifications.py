"""Notification routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from graphreview.application.usecase.notification import (
    NotifyMentionsRequest,
    NotifyMentionsResponse,
    NotifyMentionsUseCase,
    NotifyReplyRequest,
    NotifyReplyResponse,
    NotifyReplyUseCase,
)
from graphreview.domain.error import NotFoundError, NotificationDispatchError
from graphreview.domain.service import JWTService

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


class MentionAPIRequest(BaseModel):
    """API request for mention notifications."""

    mentioned_user_ids: list[str]
    commenter_name: str
    review_id: str
    comment_id: str
    comment_content: str


class ReplyAPIRequest(BaseModel):
    """API request for a reply notification."""

    parent_comment_id: str
    reply_comment_id: str
    review_id: str
    commenter_name: str
    comment_content: str


@router.post("/mention", response_model=NotifyMentionsResponse)
async def notify_mentions(
    request: MentionAPIRequest,
    notify_mentions_use_case: FromDishka[NotifyMentionsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> NotifyMentionsResponse:
    """Email the users mentioned in a comment.

    Requires authentication.

    Raises:
        HTTPException: If not authenticated, comment not found, or delivery fails
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to send notifications",
        )

    try:
        use_case_request = NotifyMentionsRequest(**request.model_dump())
        return await notify_mentions_use_case.execute(use_case_request)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except NotificationDispatchError as e:
        logfire.error("Mention notification delivery failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to send notifications",
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post("/reply", response_model=NotifyReplyResponse)
async def notify_reply(
    request: ReplyAPIRequest,
    notify_reply_use_case: FromDishka[NotifyReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> NotifyReplyResponse:
    """Email the author of the comment that was replied to.

    Requires authentication; the caller is taken to be the reply author.

    Raises:
        HTTPException: If not authenticated, parent not found, or delivery fails
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to send notifications",
        )

    try:
        use_case_request = NotifyReplyRequest(**request.model_dump(), user_id=user_id)
        return await notify_reply_use_case.execute(use_case_request)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except NotificationDispatchError as e:
        logfire.error("Reply notification delivery failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to send notification",
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
