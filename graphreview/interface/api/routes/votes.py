"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from graphreview.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    RemoveVoteRequest,
    RemoveVoteResponse,
    RemoveVoteUseCase,
)
from graphreview.domain.error import NotFoundError, SelfVoteError
from graphreview.domain.service import JWTService
from graphreview.domain.value import VoteType

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting on a comment."""

    vote_type: VoteType


@router.put("/comments/{comment_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    comment_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on a comment, replacing any earlier vote by the caller.

    Requires authentication.

    Args:
        comment_id: Comment UUID
        request: Up or down
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Vote details and the comment's vote count

    Raises:
        HTTPException: If not authenticated, voting on own comment, or comment not found
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to vote",
        )

    try:
        use_case_request = CastVoteRequest(
            comment_id=comment_id,
            user_id=user_id,
            vote_type=request.vote_type,
        )
        return await cast_vote_use_case.execute(use_case_request)
    except SelfVoteError as e:
        logfire.warn("Self vote rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You cannot vote on your own comment",
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/comments/{comment_id}/vote", response_model=RemoveVoteResponse)
async def remove_vote(
    comment_id: str,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RemoveVoteResponse:
    """Remove the caller's vote from a comment.

    Requires authentication.

    Args:
        comment_id: Comment UUID
        remove_vote_use_case: Remove vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Success status and the comment's vote count

    Raises:
        HTTPException: If not authenticated
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to remove vote",
        )

    try:
        use_case_request = RemoveVoteRequest(comment_id=comment_id, user_id=user_id)
        return await remove_vote_use_case.execute(use_case_request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
