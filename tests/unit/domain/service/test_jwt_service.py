"""Unit tests for JWTService."""

from datetime import datetime, timedelta

import jwt
import pytest

from graphreview.config import AuthSettings
from graphreview.domain.service import JWTService
from graphreview.util.jwt import JWTError


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(AuthSettings(jwt_secret="test-secret"))


class TestJWTService:
    def test_token_round_trip_carries_claims(self, jwt_service):
        token = jwt_service.create_token("user-1", "Jane Doe", "jane@example.com")

        payload = jwt_service.verify_token(token)

        assert payload.user_id == "user-1"
        assert payload.name == "Jane Doe"
        assert payload.email == "jane@example.com"

    def test_token_signed_with_other_secret_rejected(self, jwt_service):
        other = JWTService(AuthSettings(jwt_secret="other-secret"))
        token = other.create_token("user-1", "Jane Doe")

        with pytest.raises(JWTError):
            jwt_service.verify_token(token)

        assert jwt_service.get_user_id_from_token(token) is None

    def test_expired_token_treated_as_unauthenticated(self, jwt_service):
        token = jwt.encode(
            {
                "user_id": "user-1",
                "name": "Jane Doe",
                "exp": datetime.now() - timedelta(days=1),
            },
            "test-secret",
            algorithm="HS256",
        )

        assert jwt_service.get_payload_from_token(token) is None

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_garbage_token(self, jwt_service, token):
        assert jwt_service.get_user_id_from_token(token) is None

    def test_token_without_name_claim_rejected(self, jwt_service):
        token = jwt.encode(
            {"user_id": "user-1", "exp": datetime.now() + timedelta(days=1)},
            "test-secret",
            algorithm="HS256",
        )

        with pytest.raises(JWTError):
            jwt_service.verify_token(token)
