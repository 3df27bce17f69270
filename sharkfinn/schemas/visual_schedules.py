from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel


class VisualScheduleResponse(BaseModel):
    """Schema for a child's visual schedule, items are kept in display order.

    Entries are passed through as stored; they may be objects or plain labels.
    """

    id: int
    child_id: Optional[int]
    items: List[Any]
    created_at: Optional[datetime] = None
