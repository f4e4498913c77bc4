"""In-memory profile repository for testing."""

from typing import Optional

from graphreview.domain.model.user_identity import UserIdentity
from graphreview.domain.repository.profile import ProfileRepository
from graphreview.domain.value import UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[UserId, UserIdentity] = {}

    async def find_all(self) -> list[UserIdentity]:
        """List every profile ordered by name."""
        return sorted(self._profiles.values(), key=lambda p: p.name)

    async def find_by_id(self, user_id: UserId) -> Optional[UserIdentity]:
        """Find a profile by user ID."""
        return self._profiles.get(user_id)

    async def save(self, profile: UserIdentity) -> UserIdentity:
        """Create or update a profile."""
        self._profiles[profile.id] = profile
        return profile
