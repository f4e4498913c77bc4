"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from graphreview.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from graphreview.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from graphreview.domain.service import JWTService

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1)
    parent_id: str | None = None  # Parent comment ID for replies


@router.get("/reviews/{review_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    review_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetCommentsResponse:
    """Get all comments of a review.

    Top-level comments come oldest first, each with its replies nested.
    If authenticated, includes the caller's vote on each comment.

    Args:
        review_id: Review UUID
        get_comments_use_case: Get comments use case from DI
        auth_token: JWT token from cookie (optional)

    Returns:
        Nested comments with vote state
    """
    try:
        request = GetCommentsRequest(review_id=review_id, auth_token=auth_token)
        return await get_comments_use_case.execute(request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post(
    "/reviews/{review_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    review_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on a review or reply to a top-level comment.

    Requires authentication.

    Args:
        review_id: Review UUID
        request: Comment content and optional parent
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The stored comment

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    payload = jwt_service.get_payload_from_token(auth_token)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to create comments",
        )

    try:
        use_case_request = CreateCommentRequest(
            review_id=review_id,
            content=request.content,
            author_id=payload.user_id,
            author_name=payload.name,
            author_email=payload.email,
            parent_id=request.parent_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except ValidationError as e:
        logfire.warn("Comment creation rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and its replies.

    Only the comment author can delete.

    Args:
        comment_id: Comment UUID
        delete_comment_use_case: Delete comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Deletion result

    Raises:
        HTTPException: If not authenticated, not authorized, or not found
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to delete comments",
        )

    try:
        use_case_request = DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
        return await delete_comment_use_case.execute(use_case_request)
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this comment",
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
