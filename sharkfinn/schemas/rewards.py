from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class RewardResponse(BaseModel):
    id: int
    name: str
    cost: int
    created_at: Optional[datetime] = None


class RedemptionCreate(BaseModel):
    """Schema for redeeming a reward for a child"""

    child_id: Optional[int] = None
    reward_id: Optional[int] = None


class RedemptionResponse(BaseModel):
    id: int
    child_id: Optional[int]
    reward_id: Optional[int]
    created_at: datetime
