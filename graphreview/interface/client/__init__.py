"""Comment section client core."""

from .backend import CommentBackend, MentionNotification, ReplyNotification
from .composer import Composer, Key, SuggestionList
from .dispatcher import NotificationDispatcher
from .geometry import InputGeometry, MonospaceMeasurer, TextMeasurer, anchor_position
from .mention_index import MentionIndex
from .notice import Notice, NoticeLevel, NoticeLog, NoticeSink
from .section import CommentSection
from .session import Session, StaticSession
from .vote_ledger import VoteLedger

__all__ = [
    "CommentBackend",
    "CommentSection",
    "Composer",
    "InputGeometry",
    "Key",
    "MentionIndex",
    "MentionNotification",
    "MonospaceMeasurer",
    "Notice",
    "NoticeLevel",
    "NoticeLog",
    "NoticeSink",
    "NotificationDispatcher",
    "ReplyNotification",
    "Session",
    "StaticSession",
    "SuggestionList",
    "TextMeasurer",
    "VoteLedger",
    "anchor_position",
]
