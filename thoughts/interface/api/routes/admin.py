"""Administrative routes.

Only registered when Settings.admin_endpoints is enabled.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status

from thoughts.application.usecase.thought import ClearThoughtsUseCase

router = APIRouter(prefix="/thoughts", tags=["admin"], route_class=DishkaRoute)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_thoughts(
    clear_thoughts_use_case: FromDishka[ClearThoughtsUseCase],
) -> Response:
    """Delete every thought and reply."""
    await clear_thoughts_use_case.execute()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
