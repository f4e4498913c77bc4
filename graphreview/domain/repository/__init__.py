"""Repository interfaces for the Graph Review domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from graphreview.domain.repository.comment import CommentRepository
from graphreview.domain.repository.profile import ProfileRepository
from graphreview.domain.repository.vote import VoteRepository

__all__ = [
    "CommentRepository",
    "ProfileRepository",
    "VoteRepository",
]
