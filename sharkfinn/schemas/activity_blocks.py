from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ActivityBlockCreate(BaseModel):
    """Schema for adding an activity block to a session"""

    session_id: Optional[int] = None
    type: Optional[str] = None
    payload: Optional[Dict[str, Any]] = Field(
        None, description="Free-form JSON object describing the activity"
    )


class ActivityBlockResponse(BaseModel):
    id: int
    session_id: Optional[int]
    type: str
    payload: Optional[Dict[str, Any]]
    created_at: datetime
