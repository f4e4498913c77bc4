"""Notification use cases."""

from .notify_mentions import (
    NotifyMentionsRequest,
    NotifyMentionsResponse,
    NotifyMentionsUseCase,
)
from .notify_reply import NotifyReplyRequest, NotifyReplyResponse, NotifyReplyUseCase

__all__ = [
    "NotifyMentionsRequest",
    "NotifyMentionsResponse",
    "NotifyMentionsUseCase",
    "NotifyReplyRequest",
    "NotifyReplyResponse",
    "NotifyReplyUseCase",
]
