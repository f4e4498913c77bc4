"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .profile import InMemoryProfileRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryProfileRepository",
    "InMemoryVoteRepository",
]
