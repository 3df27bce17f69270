from typing import List

from fastapi import APIRouter

from sharkfinn.schemas.visual_schedules import VisualScheduleResponse
from sharkfinn.utils.deps import Repos

router = APIRouter()


@router.get(
    "",
    response_model=List[VisualScheduleResponse],
    response_model_exclude_unset=True,
)
async def get_visual_schedules(repositories: Repos):
    rows = await repositories.visual_schedules.list()
    return [VisualScheduleResponse(**row) for row in rows]
