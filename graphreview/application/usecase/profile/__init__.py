"""Profile use cases."""

from .list_profiles import ListProfilesResponse, ListProfilesUseCase, ProfileItem

__all__ = ["ListProfilesResponse", "ListProfilesUseCase", "ProfileItem"]
