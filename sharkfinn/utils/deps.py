"""
Dependency utilities for FastAPI endpoints.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request

from sharkfinn.exceptions import DatabaseError, NotImplementedInModeError
from sharkfinn.repositories.base import Repositories
from sharkfinn.repositories.sql import build_sql_repositories
from sharkfinn.repositories.static import build_static_repositories


async def get_repositories(request: Request) -> AsyncGenerator[Repositories, None]:
    """
    Yield the repositories for the app's mode. Live mode checks out one pooled
    session per request and returns it to the pool afterwards.
    """
    if not request.app.state.settings.has_db:
        yield build_static_repositories()
        return

    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        # DATABASE_URL is set but no engine could be built from it at startup
        raise DatabaseError("Database is unavailable", operation="connect")

    async with session_factory() as session:
        yield build_sql_repositories(session)


Repos = Annotated[Repositories, Depends(get_repositories)]


async def require_store(repositories: Repos) -> None:
    """
    Reject writes in static mode before the request body is looked at.

    Raises:
        NotImplementedInModeError: If no database is configured
    """
    if not repositories.live:
        raise NotImplementedInModeError()
