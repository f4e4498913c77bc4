"""Test harness for unit, integration and E2E tests.

Integration tests assume docker-compose services are already running with
`docker compose up`. Settings are loaded from environment variables
(configure via .env or export).
"""

import asyncio

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from graphreview.adapter.email import MockEmailSender
from graphreview.config import Settings
from graphreview.domain.model import UserIdentity
from graphreview.domain.repository import ProfileRepository
from graphreview.domain.service import EmailSender, JWTService
from graphreview.interface.api.app import create_app
from graphreview.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Assumes docker services already running (no docker management)
    - Settings loaded from environment automatically

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no docker needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_save_comment(integration_env):
            repo = await integration_env.get(CommentRepository)
            comment = await repo.save(Comment(...))
            assert comment.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        # Build container with specified unmocking
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


class ApiHarness:
    """FastAPI TestClient bound to a test container.

    ``sign_in`` seeds the user's profile and sets the auth cookie, so later
    requests are made as that user. Mock repositories are APP-scoped and
    hold no loop-bound state, so seeding runs on its own event loop.
    """

    def __init__(self, unmock: set[Component] | None = None) -> None:
        self.container = build_test_container(unmock=unmock or set())
        self.client = TestClient(create_app(self.container))
        self.jwt_service = JWTService(Settings().auth)

    def resolve(self, dependency):
        """Resolve an APP-scoped dependency from the container."""
        return asyncio.run(self.container.get(dependency))

    def token_for(self, user: UserIdentity) -> str:
        return self.jwt_service.create_token(str(user.id), user.name, user.email)

    def add_profile(self, user: UserIdentity) -> None:
        repo = self.resolve(ProfileRepository)
        asyncio.run(repo.save(user))

    def sign_in(self, user: UserIdentity) -> None:
        self.add_profile(user)
        self.client.cookies.set("auth_token", self.token_for(user))

    def sign_out(self) -> None:
        self.client.cookies.clear()

    @property
    def email_sender(self) -> MockEmailSender:
        return self.resolve(EmailSender)


def create_api_fixture(unmock: set[Component] | None = None):
    """Factory for fixtures yielding an ``ApiHarness``."""

    @pytest.fixture
    def _api():
        return ApiHarness(unmock=unmock)

    return _api
