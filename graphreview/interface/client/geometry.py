"""Caret geometry for placing the mention suggestion list.

Text layout is measured by a ``TextMeasurer``; the host UI supplies one that
knows its fonts. ``MonospaceMeasurer`` assumes fixed-width characters.
"""

from abc import ABC, abstractmethod

from graphreview.domain.value import Point
from graphreview.domain.value.common import ValueObject


class InputGeometry(ValueObject):
    """Position and scroll state of a text input, in pixels."""

    top: float = 0.0
    left: float = 0.0
    width: float = 480.0
    padding_top: float = 0.0
    padding_left: float = 0.0
    scroll_top: float = 0.0
    scroll_left: float = 0.0

    @property
    def content_width(self) -> float:
        return max(0.0, self.width - 2 * self.padding_left)


class TextMeasurer(ABC):
    """Measures where a piece of text ends once laid out."""

    line_height: float

    @abstractmethod
    def measure(self, text: str, width: float) -> Point:
        """Offset of the end of ``text`` within a box ``width`` pixels wide.

        ``top`` is the top of the line the text ends on.
        """
        pass


class MonospaceMeasurer(TextMeasurer):
    """Measurer for fixed-width fonts with hard wrapping at the box edge."""

    def __init__(self, char_width: float = 8.0, line_height: float = 20.0) -> None:
        self.char_width = char_width
        self.line_height = line_height

    def measure(self, text: str, width: float) -> Point:
        columns = max(1, int(width // self.char_width))
        row = 0
        column = 0
        for char in text:
            if char == "\n":
                row += 1
                column = 0
                continue
            if column >= columns:
                row += 1
                column = 0
            column += 1
        return Point(top=row * self.line_height, left=column * self.char_width)


def anchor_position(
    text: str, anchor_index: int, geometry: InputGeometry, measurer: TextMeasurer
) -> Point:
    """Viewport position just below the "@" at ``anchor_index``."""
    offset = measurer.measure(text[:anchor_index], geometry.content_width)
    return Point(
        top=geometry.top
        + geometry.padding_top
        + offset.top
        + measurer.line_height
        - geometry.scroll_top,
        left=geometry.left + geometry.padding_left + offset.left - geometry.scroll_left,
    )
