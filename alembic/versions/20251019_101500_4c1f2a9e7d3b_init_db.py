"""init_db

Revision ID: 4c1f2a9e7d3b
Revises:
Create Date: 2025-10-19 10:15:00.000000

"""

from typing import Sequence, Union

from alembic import op
from sharkfinn.bootstrap import SCHEMA_STATEMENTS, SEED_REWARDS_STATEMENT

# revision identifiers, used by Alembic.
revision: str = "4c1f2a9e7d3b"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Reverse of the creation order, dependents first
TABLES = [
    "reward_redemptions",
    "rewards",
    "visual_schedules",
    "social_stories",
    "activity_blocks",
    "sessions",
    "children",
]


def upgrade() -> None:
    # Same statements the app runs at startup
    for statement in SCHEMA_STATEMENTS:
        op.execute(statement)
    op.execute(SEED_REWARDS_STATEMENT)


def downgrade() -> None:
    for table in TABLES:
        op.execute(f"DROP TABLE IF EXISTS {table}")
