"""Current user as seen by the comment section."""

from typing import Optional

from graphreview.domain.model import UserIdentity


class Session:
    """Source of the signed-in user."""

    @property
    def current_user(self) -> Optional[UserIdentity]:
        raise NotImplementedError


class StaticSession(Session):
    """Session holding a fixed user, switchable by sign-in and sign-out."""

    def __init__(self, user: Optional[UserIdentity] = None) -> None:
        self._user = user

    @property
    def current_user(self) -> Optional[UserIdentity]:
        return self._user

    def sign_in(self, user: UserIdentity) -> None:
        self._user = user

    def sign_out(self) -> None:
        self._user = None
