"""List profiles use case."""

from pydantic import BaseModel

from graphreview.domain.service import ProfileService


class ProfileItem(BaseModel):
    """Profile directory entry."""

    id: str
    name: str
    email: str


class ListProfilesResponse(BaseModel):
    """List profiles response."""

    profiles: list[ProfileItem]
    total: int


class ListProfilesUseCase:
    """Use case for reading the profile directory used by @-mentions."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self) -> ListProfilesResponse:
        """Execute list profiles flow.

        Returns:
            Every profile, ordered by name
        """
        profiles = await self.profile_service.list_profiles()
        items = [
            ProfileItem(id=str(p.id), name=p.name, email=p.email) for p in profiles
        ]
        return ListProfilesResponse(profiles=items, total=len(items))
