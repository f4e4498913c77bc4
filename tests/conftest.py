"""Test configuration and fixtures."""

from uuid import uuid4

import logfire
import pytest

from graphreview.domain.model import UserIdentity
from graphreview.domain.value import ReviewId
from tests.factories import make_user

# Keep spans local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def review_id() -> ReviewId:
    return ReviewId(uuid4())


@pytest.fixture
def jane() -> UserIdentity:
    return make_user("Jane Doe")


@pytest.fixture
def john() -> UserIdentity:
    return make_user("John Smith")
