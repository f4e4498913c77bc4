"""Session token domain service."""

import logfire

from graphreview.config import AuthSettings
from graphreview.util.jwt import (
    JWTError,
    TokenPayload,
    decode_session_token,
    encode_session_token,
)

from .base import Service


class JWTService(Service):
    """Reads the signed-in user from the ``auth_token`` cookie.

    Tokens are minted by the external auth provider; ``create_token`` exists
    for tooling and tests that need a signed-in caller.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, name: str, email: str = "") -> str:
        """Sign a session token for the given user."""
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return encode_session_token(user_id, name, email, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token and return its claims.

        Raises:
            JWTError: If the token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = decode_session_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Session token rejected", error=str(e))
                raise
            logfire.debug("Session token verified", user_id=payload.user_id)
            return payload

    def get_payload_from_token(self, token: str | None) -> TokenPayload | None:
        """Claims of the cookie, or None when the caller is anonymous.

        A missing, expired or tampered token counts as anonymous.
        """
        if not token:
            return None
        try:
            return self.verify_token(token)
        except JWTError:
            return None

    def get_user_id_from_token(self, token: str | None) -> str | None:
        payload = self.get_payload_from_token(token)
        return payload.user_id if payload else None
