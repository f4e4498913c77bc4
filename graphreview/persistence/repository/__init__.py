"""PostgreSQL repository implementations."""

from graphreview.persistence.repository.comment import PostgresCommentRepository
from graphreview.persistence.repository.profile import PostgresProfileRepository
from graphreview.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresProfileRepository",
    "PostgresVoteRepository",
]
