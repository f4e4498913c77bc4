"""User-facing notices (toasts) raised by the comment section."""

from enum import Enum

from graphreview.domain.value.common import ValueObject


class NoticeLevel(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class Notice(ValueObject):
    """A short message shown to the user."""

    level: NoticeLevel
    message: str


class NoticeSink:
    """Receives notices; the host UI decides how to show them."""

    def push(self, notice: Notice) -> None:
        raise NotImplementedError


class NoticeLog(NoticeSink):
    """Notice sink that keeps every notice in order."""

    def __init__(self) -> None:
        self.notices: list[Notice] = []

    def push(self, notice: Notice) -> None:
        self.notices.append(notice)

    @property
    def last(self) -> Notice | None:
        return self.notices[-1] if self.notices else None

    def clear(self) -> None:
        self.notices.clear()
