from typing import List, Optional

import structlog
from fastapi import APIRouter, status

from sharkfinn.exceptions import ValidationError
from sharkfinn.schemas.children import ChildCreate, ChildResponse
from sharkfinn.utils.deps import Repos

router = APIRouter()
logger = structlog.get_logger()


@router.get(
    "", response_model=List[ChildResponse], response_model_exclude_unset=True
)
async def get_children(repositories: Repos):
    """Get all children ordered by id"""
    rows = await repositories.children.list()
    return [ChildResponse(**row) for row in rows]


@router.get(
    "/{child_id}", response_model=ChildResponse, response_model_exclude_unset=True
)
async def get_child(child_id: int, repositories: Repos):
    """Get a single child"""
    row = await repositories.children.get(child_id)
    return ChildResponse(**row)


@router.post(
    "",
    response_model=ChildResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_child(repositories: Repos, child_data: Optional[ChildCreate] = None):
    """Create a new child. Validated in both modes; static mode only echoes."""
    child_data = child_data or ChildCreate()
    if not child_data.name:
        raise ValidationError("name is required", field="name")

    row = await repositories.children.create(child_data.name, child_data.age)
    logger.info("Child created", child_id=row["id"], live=repositories.live)
    return ChildResponse(**row)
