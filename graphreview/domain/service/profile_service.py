"""Profile directory domain service."""

import logfire

from graphreview.domain.model.user_identity import UserIdentity
from graphreview.domain.repository import ProfileRepository
from graphreview.domain.value import UserId

from .base import Service


class ProfileService(Service):
    """Domain service for profile directory lookups."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def list_profiles(self) -> list[UserIdentity]:
        """List every profile, ordered by name."""
        with logfire.span("profile_service.list_profiles"):
            profiles = await self.profile_repository.find_all()
            logfire.info("Profiles listed", count=len(profiles))
            return profiles

    async def get_profile(self, user_id: UserId) -> UserIdentity | None:
        """Get a profile by user ID.

        Args:
            user_id: User ID

        Returns:
            Profile if found, None otherwise
        """
        with logfire.span("profile_service.get_profile", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_id(user_id)
            if not profile:
                logfire.warn("Profile not found", user_id=str(user_id))
            return profile

    async def ensure_profile(
        self, user_id: UserId, name: str, email: str = ""
    ) -> UserIdentity:
        """Get a profile, creating it from auth claims when missing.

        Profiles are normally synced from the auth provider; a user who signs
        in before the sync ran still gets one on first comment.

        Args:
            user_id: User ID from the auth token
            name: Display name from the auth token
            email: Email from the auth token

        Returns:
            Existing or newly created profile
        """
        with logfire.span("profile_service.ensure_profile", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_id(user_id)
            if profile:
                return profile

            profile = await self.profile_repository.save(
                UserIdentity(id=user_id, name=name, email=email)
            )
            logfire.info("Profile created from auth claims", user_id=str(user_id))
            return profile
