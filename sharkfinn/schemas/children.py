from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ChildCreate(BaseModel):
    """Schema for creating a new child"""

    name: Optional[str] = None
    age: Optional[int] = Field(None, description="Defaults to 5 when omitted")


class ChildResponse(BaseModel):
    """Schema for child response"""

    id: int
    name: str
    age: int
    created_at: Optional[datetime] = None
    # Only set by the static-mode echo
    note: Optional[str] = None
