from typing import Optional

from fastapi import APIRouter, Depends, status

from sharkfinn.exceptions import ValidationError
from sharkfinn.schemas.activity_blocks import (
    ActivityBlockCreate,
    ActivityBlockResponse,
)
from sharkfinn.utils.deps import Repos, require_store

router = APIRouter(dependencies=[Depends(require_store)])


@router.post(
    "", response_model=ActivityBlockResponse, status_code=status.HTTP_201_CREATED
)
async def create_activity_block(
    repositories: Repos, block_data: Optional[ActivityBlockCreate] = None
):
    """Add an activity block to a session"""
    block_data = block_data or ActivityBlockCreate()
    if not block_data.session_id or not block_data.type:
        raise ValidationError("session_id and type required")

    row = await repositories.activity_blocks.create(
        block_data.session_id,
        block_data.type,
        block_data.payload if block_data.payload is not None else {},
    )
    return ActivityBlockResponse(**row)
