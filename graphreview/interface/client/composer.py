"""Comment composer with @-mention autocomplete.

A ``Composer`` holds the text and caret of one input (the main comment box
or a reply box) together with its own mention detection state, so reply
boxes never interfere with each other.
"""

from enum import Enum
from typing import Optional

from graphreview.domain.model import UserIdentity
from graphreview.domain.service.mention import INACTIVE, commit_mention, detect_mention
from graphreview.domain.value import MentionQuery, Point

from .geometry import InputGeometry, MonospaceMeasurer, TextMeasurer, anchor_position
from .mention_index import MentionIndex


class Key(str, Enum):
    """Keys the suggestion list reacts to."""

    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    ENTER = "Enter"
    ESCAPE = "Escape"


class SuggestionList:
    """Open/closed list of mention candidates with a circular selection."""

    def __init__(self) -> None:
        self.items: list[UserIdentity] = []
        self.selected_index = 0
        self.is_open = False

    def open(self, items: list[UserIdentity]) -> None:
        self.items = list(items)
        self.selected_index = 0
        self.is_open = bool(self.items)

    def close(self) -> None:
        self.is_open = False

    @property
    def is_active(self) -> bool:
        """Whether the list is shown and has something to pick."""
        return self.is_open and bool(self.items)

    @property
    def selected(self) -> Optional[UserIdentity]:
        if not self.is_active:
            return None
        return self.items[self.selected_index]

    def move_down(self) -> None:
        if self.items:
            self.selected_index = (self.selected_index + 1) % len(self.items)

    def move_up(self) -> None:
        if self.items:
            self.selected_index = (self.selected_index - 1) % len(self.items)


class Composer:
    """Text input state for writing a comment."""

    def __init__(
        self,
        mention_index: MentionIndex,
        measurer: Optional[TextMeasurer] = None,
        geometry: Optional[InputGeometry] = None,
    ) -> None:
        self.mention_index = mention_index
        self.measurer = measurer or MonospaceMeasurer()
        self.geometry = geometry or InputGeometry()
        self.text = ""
        self.caret = 0
        self.mention: MentionQuery = INACTIVE
        self.suggestions = SuggestionList()
        self.anchor: Optional[Point] = None

    def set_text(self, text: str, caret: Optional[int] = None) -> None:
        """Apply an edit and refresh mention suggestions.

        Args:
            text: New input text
            caret: Caret offset after the edit, end of text when omitted
        """
        self.text = text
        self.caret = len(text) if caret is None else max(0, min(caret, len(text)))
        self._detect()

    def move_caret(self, caret: int) -> None:
        """Move the caret without editing, e.g. on click or arrow keys."""
        self.set_text(self.text, caret)

    def set_geometry(self, geometry: InputGeometry) -> None:
        """Update input position or scroll state and re-place the list."""
        self.geometry = geometry
        if self.mention.active:
            self.anchor = anchor_position(
                self.text, self.mention.anchor_index, self.geometry, self.measurer
            )

    def handle_key(self, key: Key | str) -> bool:
        """React to a key press while suggestions may be shown.

        Returns:
            True if the key was consumed by the suggestion list and must not
            reach the input
        """
        if not self.suggestions.is_active:
            return False

        if key == Key.ARROW_DOWN:
            self.suggestions.move_down()
        elif key == Key.ARROW_UP:
            self.suggestions.move_up()
        elif key == Key.ENTER:
            selected = self.suggestions.selected
            if selected is not None:
                self.select(selected)
        elif key == Key.ESCAPE:
            self.suggestions.close()
        else:
            return False
        return True

    def select(self, user: UserIdentity) -> None:
        """Replace the typed "@token" with the user's full mention."""
        if not self.mention.active:
            return
        self.text, self.caret = commit_mention(
            self.text, self.caret, self.mention.anchor_index, user.name
        )
        self.mention = INACTIVE
        self.anchor = None
        self.suggestions.close()

    def click_outside(self) -> None:
        """Close the suggestion list, leaving the text alone."""
        self.suggestions.close()

    def clear(self) -> None:
        self.text = ""
        self.caret = 0
        self.mention = INACTIVE
        self.anchor = None
        self.suggestions.close()

    def _detect(self) -> None:
        self.mention = detect_mention(self.text, self.caret)
        if not self.mention.active:
            self.anchor = None
            self.suggestions.close()
            return

        self.suggestions.open(self.mention_index.filter(self.mention.query))
        self.anchor = anchor_position(
            self.text, self.mention.anchor_index, self.geometry, self.measurer
        )
