"""
Repository interfaces shared by the live (SQL) and static (fixture) modes.

Rows are returned as plain dictionaries keyed by column name.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

Row = Dict[str, Any]


class HealthRepository(ABC):
    @abstractmethod
    async def check(self) -> Row:
        """Return the health payload, raising if the store is unreachable."""
        pass


class ChildRepository(ABC):
    @abstractmethod
    async def list(self) -> List[Row]:
        pass

    @abstractmethod
    async def get(self, child_id: int) -> Row:
        """Fetch one child, raising NotFoundError if it does not exist."""
        pass

    @abstractmethod
    async def create(self, name: str, age: Optional[int]) -> Row:
        pass


class SessionRepository(ABC):
    @abstractmethod
    async def create(self, child_id: int, notes: Optional[str]) -> Row:
        pass

    @abstractmethod
    async def update(
        self, session_id: int, status: Optional[str], notes: Optional[str]
    ) -> Row:
        """Update a session, keeping the stored value of any field passed as None."""
        pass


class ActivityBlockRepository(ABC):
    @abstractmethod
    async def create(
        self, session_id: int, block_type: str, payload: Dict[str, Any]
    ) -> Row:
        pass


class SocialStoryRepository(ABC):
    @abstractmethod
    async def list(self) -> List[Row]:
        pass

    @abstractmethod
    async def create(self, title: str, body: str) -> Row:
        pass


class VisualScheduleRepository(ABC):
    @abstractmethod
    async def list(self) -> List[Row]:
        pass


class RewardRepository(ABC):
    @abstractmethod
    async def list(self) -> List[Row]:
        pass

    @abstractmethod
    async def redeem(self, child_id: int, reward_id: int) -> Row:
        pass


@dataclass(frozen=True)
class Repositories:
    """One repository per entity, all backed by the same mode."""

    live: bool
    health: HealthRepository
    children: ChildRepository
    sessions: SessionRepository
    activity_blocks: ActivityBlockRepository
    social_stories: SocialStoryRepository
    visual_schedules: VisualScheduleRepository
    rewards: RewardRepository
