"""Schema bootstrap for live mode.

Creates the tables on every boot when missing and seeds the default rewards
once, while the rewards table is empty.
"""

from typing import List, Optional

import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from sharkfinn.config import Settings
from sharkfinn.database import create_engine

logger = structlog.get_logger()

# Table creation order respects foreign keys
SCHEMA_STATEMENTS: List[str] = [
    """CREATE TABLE IF NOT EXISTS children (
        id SERIAL PRIMARY KEY,
        name TEXT NOT NULL,
        age INT NOT NULL DEFAULT 5,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )""",
    """CREATE TABLE IF NOT EXISTS sessions (
        id SERIAL PRIMARY KEY,
        child_id INT REFERENCES children(id) ON DELETE CASCADE,
        status TEXT DEFAULT 'open',
        notes TEXT,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )""",
    """CREATE TABLE IF NOT EXISTS activity_blocks (
        id SERIAL PRIMARY KEY,
        session_id INT REFERENCES sessions(id) ON DELETE CASCADE,
        type TEXT NOT NULL,
        payload JSONB DEFAULT '{}'::jsonb,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )""",
    """CREATE TABLE IF NOT EXISTS social_stories (
        id SERIAL PRIMARY KEY,
        title TEXT NOT NULL,
        body TEXT NOT NULL,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )""",
    """CREATE TABLE IF NOT EXISTS visual_schedules (
        id SERIAL PRIMARY KEY,
        child_id INT REFERENCES children(id) ON DELETE CASCADE,
        items JSONB NOT NULL,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )""",
    """CREATE TABLE IF NOT EXISTS rewards (
        id SERIAL PRIMARY KEY,
        name TEXT NOT NULL,
        cost INT NOT NULL DEFAULT 5,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )""",
    """CREATE TABLE IF NOT EXISTS reward_redemptions (
        id SERIAL PRIMARY KEY,
        child_id INT REFERENCES children(id) ON DELETE CASCADE,
        reward_id INT REFERENCES rewards(id) ON DELETE SET NULL,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )""",
]

# Guarded by an emptiness check rather than an upsert, so edited or
# renamed defaults are never re-added on restart
SEED_REWARDS_STATEMENT = """
    INSERT INTO rewards (name, cost)
    SELECT x.name, x.cost
    FROM (VALUES ('Sticker Pack', 5), ('Extra Screen Time', 10)) AS x(name, cost)
    WHERE NOT EXISTS (SELECT 1 FROM rewards)
"""


async def bootstrap_schema(engine: AsyncEngine) -> None:
    """Create missing tables and seed default rewards.

    Args:
        engine: Async engine connected to the live database

    Raises:
        SQLAlchemyError: If any statement fails
    """
    # Each statement commits on its own
    for statement in SCHEMA_STATEMENTS:
        async with engine.begin() as conn:
            await conn.execute(text(statement))

    async with engine.begin() as conn:
        result = await conn.execute(text(SEED_REWARDS_STATEMENT))
        seeded = result.rowcount

    logger.info(
        "Database schema ready",
        tables=len(SCHEMA_STATEMENTS),
        seeded_rewards=seeded,
    )


def log_bootstrap_error(error: Exception) -> None:
    logger.error(
        "DB bootstrap error",
        error=str(error),
        error_type=type(error).__name__,
    )


async def run_bootstrap(engine: AsyncEngine) -> bool:
    """Run the schema bootstrap without letting failures stop startup.

    Returns:
        bool: True if the bootstrap completed
    """
    try:
        await bootstrap_schema(engine)
    except Exception as e:
        log_bootstrap_error(e)
        return False
    return True


async def start_database(settings: Settings) -> Optional[AsyncEngine]:
    """Create the engine and bootstrap the schema, never raising.

    Returns:
        The engine, or None if DATABASE_URL could not be turned into one
    """
    try:
        engine = create_engine(settings)
    except Exception as e:
        log_bootstrap_error(e)
        return None

    await run_bootstrap(engine)
    return engine
