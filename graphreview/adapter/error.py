"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class BackendError(AdapterError):
    """A call to the comment backend failed.

    ``status_code`` is the HTTP status when the backend answered, None when
    the request never got a response.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class NetworkError(BackendError):
    """The comment backend could not be reached."""

    pass


class ServerError(BackendError):
    """The comment backend answered with an error status or an unreadable body."""

    def __init__(self, message: str, status_code: int, detail: str = "") -> None:
        self.detail = detail
        super().__init__(message, status_code=status_code)
