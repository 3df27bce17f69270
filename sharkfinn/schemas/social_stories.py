from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class SocialStoryCreate(BaseModel):
    title: Optional[str] = None
    body: Optional[str] = None


class SocialStoryResponse(BaseModel):
    id: int
    title: str
    body: str
    created_at: Optional[datetime] = None
