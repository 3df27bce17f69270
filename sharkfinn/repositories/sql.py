"""
Live-mode repositories. Every method issues exactly one parameterized
statement against the pooled session; inserts and updates commit immediately.
"""

import json
from typing import Any, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from sharkfinn.exceptions import NotFoundError
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
from sharkfinn.utils.error_handling import decode_json, handle_database_errors


class SqlRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _fetch_all(self, query, params: Optional[Dict[str, Any]] = None) -> List[Row]:
        result = await self.db.execute(query, params or {})
        return [dict(row) for row in result.mappings().all()]

    async def _fetch_one(self, query, params: Dict[str, Any]) -> Optional[Row]:
        result = await self.db.execute(query, params)
        row = result.mappings().first()
        return dict(row) if row else None

    async def _write(self, query, params: Dict[str, Any]) -> Optional[Row]:
        row = await self._fetch_one(query, params)
        await self.db.commit()
        return row


class SqlHealthRepository(SqlRepository, HealthRepository):
    @handle_database_errors("check database health")
    async def check(self) -> Row:
        row = await self._fetch_one(text("SELECT NOW() AS now"), {})
        return {"ok": True, "db": True, "now": row["now"]}


class SqlChildRepository(SqlRepository, ChildRepository):
    @handle_database_errors("retrieve children")
    async def list(self) -> List[Row]:
        return await self._fetch_all(
            text("SELECT id, name, age, created_at FROM children ORDER BY id ASC")
        )

    @handle_database_errors("retrieve child")
    async def get(self, child_id: int) -> Row:
        row = await self._fetch_one(
            text("SELECT id, name, age, created_at FROM children WHERE id = :id"),
            {"id": child_id},
        )
        if row is None:
            raise NotFoundError(resource_type="child")
        return row

    @handle_database_errors("create child")
    async def create(self, name: str, age: Optional[int]) -> Row:
        query = text("""
            INSERT INTO children (name, age)
            VALUES (:name, :age)
            RETURNING id, name, age, created_at
        """)
        return await self._write(query, {"name": name, "age": 5 if age is None else age})


class SqlSessionRepository(SqlRepository, SessionRepository):
    @handle_database_errors("create session")
    async def create(self, child_id: int, notes: Optional[str]) -> Row:
        query = text("""
            INSERT INTO sessions (child_id, notes)
            VALUES (:child_id, :notes)
            RETURNING *
        """)
        return await self._write(query, {"child_id": child_id, "notes": notes})

    @handle_database_errors("update session")
    async def update(
        self, session_id: int, status: Optional[str], notes: Optional[str]
    ) -> Row:
        # updated_at is refreshed even when neither field changes
        query = text("""
            UPDATE sessions
            SET status = COALESCE(:status, status),
                notes = COALESCE(:notes, notes),
                updated_at = NOW()
            WHERE id = :id
            RETURNING *
        """)
        row = await self._write(
            query, {"status": status, "notes": notes, "id": session_id}
        )
        if row is None:
            raise NotFoundError(resource_type="session")
        return row


class SqlActivityBlockRepository(SqlRepository, ActivityBlockRepository):
    @handle_database_errors("create activity block")
    async def create(
        self, session_id: int, block_type: str, payload: Dict[str, Any]
    ) -> Row:
        query = text("""
            INSERT INTO activity_blocks (session_id, type, payload)
            VALUES (:session_id, :type, :payload)
            RETURNING *
        """)
        row = await self._write(
            query,
            {
                "session_id": session_id,
                "type": block_type,
                "payload": json.dumps(payload),
            },
        )
        row["payload"] = decode_json(row["payload"])
        return row


class SqlSocialStoryRepository(SqlRepository, SocialStoryRepository):
    @handle_database_errors("retrieve social stories")
    async def list(self) -> List[Row]:
        return await self._fetch_all(
            text("SELECT * FROM social_stories ORDER BY id ASC")
        )

    @handle_database_errors("create social story")
    async def create(self, title: str, body: str) -> Row:
        query = text("""
            INSERT INTO social_stories (title, body)
            VALUES (:title, :body)
            RETURNING *
        """)
        return await self._write(query, {"title": title, "body": body})


class SqlVisualScheduleRepository(SqlRepository, VisualScheduleRepository):
    @handle_database_errors("retrieve visual schedules")
    async def list(self) -> List[Row]:
        rows = await self._fetch_all(
            text("SELECT * FROM visual_schedules ORDER BY id ASC")
        )
        for row in rows:
            row["items"] = decode_json(row["items"])
        return rows


class SqlRewardRepository(SqlRepository, RewardRepository):
    @handle_database_errors("retrieve rewards")
    async def list(self) -> List[Row]:
        return await self._fetch_all(text("SELECT * FROM rewards ORDER BY id ASC"))

    @handle_database_errors("redeem reward")
    async def redeem(self, child_id: int, reward_id: int) -> Row:
        query = text("""
            INSERT INTO reward_redemptions (child_id, reward_id)
            VALUES (:child_id, :reward_id)
            RETURNING *
        """)
        return await self._write(query, {"child_id": child_id, "reward_id": reward_id})


def build_sql_repositories(db: AsyncSession) -> Repositories:
    return Repositories(
        live=True,
        health=SqlHealthRepository(db),
        children=SqlChildRepository(db),
        sessions=SqlSessionRepository(db),
        activity_blocks=SqlActivityBlockRepository(db),
        social_stories=SqlSocialStoryRepository(db),
        visual_schedules=SqlVisualScheduleRepository(db),
        rewards=SqlRewardRepository(db),
    )
