from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class SessionCreate(BaseModel):
    """Schema for opening a therapy session"""

    child_id: Optional[int] = None
    notes: Optional[str] = None


class SessionUpdate(BaseModel):
    """Schema for a partial session update, omitted fields keep their value"""

    status: Optional[str] = None
    notes: Optional[str] = None


class SessionResponse(BaseModel):
    id: int
    child_id: Optional[int]
    status: Optional[str]
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime
