"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .notification_service import EmailSender, NotificationService
from .profile_service import ProfileService
from .vote_service import VoteService

__all__ = [
    "CommentService",
    "EmailSender",
    "JWTService",
    "NotificationService",
    "ProfileService",
    "Service",
    "VoteService",
]
