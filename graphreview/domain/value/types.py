"""Domain value objects for Graph Review.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from graphreview.domain.value.common import ValueObject


class VoteType(str, Enum):
    """Type of vote on a comment."""

    UP = "up"
    DOWN = "down"


class SectionState(str, Enum):
    """Lifecycle of a comment section instance."""

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    ERRORED = "errored"


class SegmentType(str, Enum):
    """Kind of rendered comment segment."""

    TEXT = "text"
    MENTION = "mention"


class MentionQuery(ValueObject):
    """Result of scanning composer text for an in-progress mention.

    Attributes:
        active: Whether an "@token" is being typed at the caret
        query: Lower-cased text between the "@" and the caret
        anchor_index: Offset of the "@" in the text (-1 when inactive)
    """

    active: bool
    query: str = ""
    anchor_index: int = -1


class Segment(ValueObject):
    """A piece of rendered comment content."""

    type: SegmentType
    value: str
    user_id: str | None = None


class Point(ValueObject):
    """Pixel coordinates, relative to the viewport unless stated otherwise."""

    top: float
    left: float
