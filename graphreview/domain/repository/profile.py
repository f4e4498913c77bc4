"""Profile directory repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from graphreview.domain.model.user_identity import UserIdentity
from graphreview.domain.value import UserId


class ProfileRepository(ABC):
    """Read access to the profile directory."""

    @abstractmethod
    async def find_all(self) -> List[UserIdentity]:
        """List all profiles ordered by name."""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[UserIdentity]:
        """Find a profile by user ID."""
        pass

    @abstractmethod
    async def save(self, profile: UserIdentity) -> UserIdentity:
        """Create or update a profile (used by seeding and tests)."""
        pass
