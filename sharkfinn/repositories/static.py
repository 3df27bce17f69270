"""
Static-mode repositories used when no database is configured.

Reads return fixed sample data so the frontend can run offline; writes are
rejected with NotImplementedInModeError and never touch any state.
"""

from typing import Any, Dict, List, Optional

from sharkfinn.exceptions import NotImplementedInModeError
from sharkfinn.repositories.base import (
    ActivityBlockRepository,
    ChildRepository,
    HealthRepository,
    Repositories,
    RewardRepository,
    Row,
    SessionRepository,
    SocialStoryRepository,
    VisualScheduleRepository,
)

SAMPLE_CHILD_NAME = "Sample Child"
SAMPLE_CHILD_AGE = 6


class StaticHealthRepository(HealthRepository):
    async def check(self) -> Row:
        return {"ok": True, "db": False, "status": "healthy (no DB configured)"}


class StaticChildRepository(ChildRepository):
    async def list(self) -> List[Row]:
        return [{"id": 1, "name": SAMPLE_CHILD_NAME, "age": SAMPLE_CHILD_AGE}]

    async def get(self, child_id: int) -> Row:
        return {"id": child_id, "name": SAMPLE_CHILD_NAME, "age": SAMPLE_CHILD_AGE}

    async def create(self, name: str, age: Optional[int]) -> Row:
        # Echo only, nothing is stored
        return {
            "id": 2,
            "name": name,
            "age": 5 if age is None else age,
            "note": "Starter (no DB)",
        }


class StaticSessionRepository(SessionRepository):
    async def create(self, child_id: int, notes: Optional[str]) -> Row:
        raise NotImplementedInModeError()

    async def update(
        self, session_id: int, status: Optional[str], notes: Optional[str]
    ) -> Row:
        raise NotImplementedInModeError()


class StaticActivityBlockRepository(ActivityBlockRepository):
    async def create(
        self, session_id: int, block_type: str, payload: Dict[str, Any]
    ) -> Row:
        raise NotImplementedInModeError()


class StaticSocialStoryRepository(SocialStoryRepository):
    async def list(self) -> List[Row]:
        return [{"id": 1, "title": "Welcome", "body": "Be kind and brave."}]

    async def create(self, title: str, body: str) -> Row:
        raise NotImplementedInModeError()


class StaticVisualScheduleRepository(VisualScheduleRepository):
    async def list(self) -> List[Row]:
        return [
            {
                "id": 1,
                "child_id": 1,
                "items": [{"time": "08:00", "label": "Breakfast"}],
            }
        ]


class StaticRewardRepository(RewardRepository):
    async def list(self) -> List[Row]:
        return [{"id": 1, "name": "Sticker Pack", "cost": 5}]

    async def redeem(self, child_id: int, reward_id: int) -> Row:
        raise NotImplementedInModeError()


def build_static_repositories() -> Repositories:
    return Repositories(
        live=False,
        health=StaticHealthRepository(),
        children=StaticChildRepository(),
        sessions=StaticSessionRepository(),
        activity_blocks=StaticActivityBlockRepository(),
        social_stories=StaticSocialStoryRepository(),
        visual_schedules=StaticVisualScheduleRepository(),
        rewards=StaticRewardRepository(),
    )
