"""Profile directory routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from graphreview.application.usecase.profile import (
    ListProfilesResponse,
    ListProfilesUseCase,
)

router = APIRouter(prefix="/profiles", tags=["profiles"], route_class=DishkaRoute)


@router.get("", response_model=ListProfilesResponse)
async def list_profiles(
    list_profiles_use_case: FromDishka[ListProfilesUseCase],
) -> ListProfilesResponse:
    """List every profile for @-mention autocomplete.

    Args:
        list_profiles_use_case: List profiles use case from DI

    Returns:
        Profiles ordered by name
    """
    return await list_profiles_use_case.execute()
