"""Encoding and decoding of the ``auth_token`` cookie.

The auth provider signs a token carrying the user's id, display name and
email. The comments service only verifies it; ``encode_session_token``
exists so tests and tooling can act as a signed-in user.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from graphreview.config import AuthSettings

REQUIRED_CLAIMS = ["exp", "user_id", "name"]


class TokenPayload(BaseModel):
    """Claims of a session token."""

    user_id: str
    name: str
    email: str = ""
    exp: datetime


class JWTError(Exception):
    """The token is missing claims, expired or not signed with our secret."""

    pass


def encode_session_token(
    user_id: str, name: str, email: str, settings: AuthSettings
) -> str:
    """Sign a session token valid for ``settings.jwt_expiry_days``."""
    expires_at = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)
    claims = {"user_id": user_id, "name": name, "email": email, "exp": expires_at}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_session_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of a session token and read its claims.

    Raises:
        JWTError: If the token cannot be trusted
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Session token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid session token: {e}") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError as e:
        raise JWTError("Session token has malformed claims") from e
