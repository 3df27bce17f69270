from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, status

from sharkfinn.exceptions import ValidationError
from sharkfinn.schemas.rewards import (
    RedemptionCreate,
    RedemptionResponse,
    RewardResponse,
)
from sharkfinn.utils.deps import Repos, require_store

router = APIRouter()
logger = structlog.get_logger()


@router.get("", response_model=List[RewardResponse], response_model_exclude_unset=True)
async def get_rewards(repositories: Repos):
    rows = await repositories.rewards.list()
    return [RewardResponse(**row) for row in rows]


@router.post(
    "/redeem",
    response_model=RedemptionResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_store)],
)
async def redeem_reward(
    repositories: Repos, redemption_data: Optional[RedemptionCreate] = None
):
    """Record that a child spent a reward"""
    redemption_data = redemption_data or RedemptionCreate()
    if not redemption_data.child_id or not redemption_data.reward_id:
        raise ValidationError("child_id and reward_id required")

    row = await repositories.rewards.redeem(
        redemption_data.child_id, redemption_data.reward_id
    )
    logger.info(
        "Reward redeemed",
        child_id=row["child_id"],
        reward_id=row["reward_id"],
    )
    return RedemptionResponse(**row)
