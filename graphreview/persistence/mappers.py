"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from graphreview.domain.model import Comment, UserIdentity, Vote
from graphreview.domain.value import CommentId, ReviewId, UserId, VoteId, VoteType


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_profile(row: Dict[str, Any]) -> UserIdentity:
    """Convert database row to UserIdentity domain model.

    Args:
        row: Database row as dict

    Returns:
        UserIdentity domain model
    """
    return UserIdentity(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=row.get("email") or "",
    )


def profile_to_dict(profile: UserIdentity) -> Dict[str, Any]:
    """Convert UserIdentity domain model to database dict."""
    return {"id": profile.id, "name": profile.name, "email": profile.email}


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Vote state is not stored on the row; it is attached by the read side.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        review_id=ReviewId(_uuid(row["review_id"])),
        author_id=UserId(_uuid(row["user_id"])),
        author_name=row.get("author_name"),
        content=row["content"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": comment.id,
        "review_id": comment.review_id,
        "parent_id": comment.parent_id,
        "user_id": comment.author_id,
        "author_name": comment.author_name,
        "content": comment.content,
        "created_at": comment.created_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(row["id"]),
        comment_id=CommentId(_uuid(row["comment_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": vote.id,
        "comment_id": vote.comment_id,
        "user_id": vote.user_id,
        "vote_type": vote.vote_type.value,
        "created_at": vote.created_at,
        "updated_at": vote.updated_at,
    }
