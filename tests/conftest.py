from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from sharkfinn.config import Settings
from sharkfinn.exceptions import DatabaseError, NotFoundError
from sharkfinn.main import create_app
from sharkfinn.repositories.base import (
    ActivityBlockRepository,
    ChildRepository,
    HealthRepository,
    Repositories,
    RewardRepository,
    SessionRepository,
    SocialStoryRepository,
    VisualScheduleRepository,
)
from sharkfinn.utils.deps import get_repositories


class InMemoryStore:
    """Stands in for the seven tables, with the same defaults and references."""

    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {
            "children": [],
            "sessions": [],
            "activity_blocks": [],
            "social_stories": [],
            "visual_schedules": [],
            "rewards": [],
            "reward_redemptions": [],
        }
        self._clock = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)
        self.writes = 0

    def now(self) -> datetime:
        # Strictly increasing so updated_at always moves
        self._clock += timedelta(seconds=1)
        return self._clock

    def insert(self, table: str, **values) -> Dict[str, Any]:
        rows = self.tables[table]
        row = {"id": len(rows) + 1, **values, "created_at": self.now()}
        rows.append(row)
        self.writes += 1
        return dict(row)

    def find(self, table: str, row_id: int) -> Optional[Dict[str, Any]]:
        return next((row for row in self.tables[table] if row["id"] == row_id), None)

    def require_reference(self, table: str, row_id: int, operation: str) -> None:
        if self.find(table, row_id) is None:
            raise DatabaseError(
                f"Failed to {operation}: Invalid reference - related record not found",
                operation=operation,
            )


class FakeHealthRepository(HealthRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def check(self):
        return {"ok": True, "db": True, "now": self.store.now()}


class FakeChildRepository(ChildRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def list(self):
        return [dict(row) for row in self.store.tables["children"]]

    async def get(self, child_id):
        row = self.store.find("children", child_id)
        if row is None:
            raise NotFoundError(resource_type="child")
        return dict(row)

    async def create(self, name, age):
        return self.store.insert("children", name=name, age=5 if age is None else age)


class FakeSessionRepository(SessionRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def create(self, child_id, notes):
        self.store.require_reference("children", child_id, "create session")
        row = self.store.insert(
            "sessions", child_id=child_id, status="open", notes=notes
        )
        self.store.find("sessions", row["id"])["updated_at"] = row["created_at"]
        return dict(self.store.find("sessions", row["id"]))

    async def update(self, session_id, status, notes):
        row = self.store.find("sessions", session_id)
        if row is None:
            raise NotFoundError(resource_type="session")
        if status is not None:
            row["status"] = status
        if notes is not None:
            row["notes"] = notes
        row["updated_at"] = self.store.now()
        self.store.writes += 1
        return dict(row)


class FakeActivityBlockRepository(ActivityBlockRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def create(self, session_id, block_type, payload):
        self.store.require_reference("sessions", session_id, "create activity block")
        return self.store.insert(
            "activity_blocks", session_id=session_id, type=block_type, payload=payload
        )


class FakeSocialStoryRepository(SocialStoryRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def list(self):
        return [dict(row) for row in self.store.tables["social_stories"]]

    async def create(self, title, body):
        return self.store.insert("social_stories", title=title, body=body)


class FakeVisualScheduleRepository(VisualScheduleRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def list(self):
        return [dict(row) for row in self.store.tables["visual_schedules"]]


class FakeRewardRepository(RewardRepository):
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def list(self):
        return [dict(row) for row in self.store.tables["rewards"]]

    async def redeem(self, child_id, reward_id):
        self.store.require_reference("children", child_id, "redeem reward")
        self.store.require_reference("rewards", reward_id, "redeem reward")
        return self.store.insert(
            "reward_redemptions", child_id=child_id, reward_id=reward_id
        )


def build_fake_repositories(store: InMemoryStore) -> Repositories:
    return Repositories(
        live=True,
        health=FakeHealthRepository(store),
        children=FakeChildRepository(store),
        sessions=FakeSessionRepository(store),
        activity_blocks=FakeActivityBlockRepository(store),
        social_stories=FakeSocialStoryRepository(store),
        visual_schedules=FakeVisualScheduleRepository(store),
        rewards=FakeRewardRepository(store),
    )


@pytest.fixture
def static_dir(tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text(
        "<!doctype html><title>SharkFinn Learning</title>", encoding="utf-8"
    )
    (public / "app.js").write_text("console.log('shark');", encoding="utf-8")
    return public


@pytest.fixture
def settings(static_dir) -> Settings:
    return Settings(_env_file=None, DATABASE_URL=None, STATIC_DIR=str(static_dir))


@pytest.fixture
def static_client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store() -> InMemoryStore:
    store = InMemoryStore()
    store.insert("rewards", name="Sticker Pack", cost=5)
    store.insert("rewards", name="Extra Screen Time", cost=10)
    store.writes = 0
    return store


@pytest.fixture
def live_app(settings, store):
    app = create_app(settings)
    app.dependency_overrides[get_repositories] = lambda: build_fake_repositories(store)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(live_app):
    with TestClient(live_app) as test_client:
        yield test_client


@pytest.fixture
def child(client) -> Dict[str, Any]:
    response = client.post("/api/children", json={"name": "Ava", "age": 7})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def session(client, child) -> Dict[str, Any]:
    response = client.post("/api/sessions", json={"child_id": child["id"]})
    assert response.status_code == 201
    return response.json()
