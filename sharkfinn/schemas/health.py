from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class HealthCheck(BaseModel):
    ok: bool = True
    db: bool
    status: Optional[str] = None
    now: Optional[datetime] = None
