import ssl
from typing import Any, Dict, Optional, Union

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from sharkfinn.config import Settings


def get_ssl_setting(sslmode: Optional[str]) -> Union[ssl.SSLContext, str, None]:
    """Translate a libpq sslmode into the `ssl` argument asyncpg expects.

    Raises:
        ValueError: If the sslmode is not one libpq defines
    """
    if sslmode is None or sslmode == "disable":
        return None

    if sslmode in ("allow", "prefer"):
        # asyncpg negotiates these itself
        return sslmode

    if sslmode == "require":
        # Hosted providers present certificates we do not verify
        ssl_context = ssl.create_default_context()
        ssl_context.check_hostname = False
        ssl_context.verify_mode = ssl.CERT_NONE
        return ssl_context

    if sslmode == "verify-ca":
        ssl_context = ssl.create_default_context()
        ssl_context.check_hostname = False
        return ssl_context

    if sslmode == "verify-full":
        return ssl.create_default_context()

    raise ValueError(f"Unsupported sslmode: {sslmode}")


def get_connect_args(settings: Settings) -> Dict[str, Any]:
    """Get connection arguments"""
    connect_args: Dict[str, Any] = {
        "timeout": settings.DB_CONNECT_TIMEOUT,
        "server_settings": {
            "application_name": "sharkfinn",
        },
    }

    ssl_setting = get_ssl_setting(settings.db_ssl_mode)
    if ssl_setting is not None:
        connect_args["ssl"] = ssl_setting

    return connect_args


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the pooled async engine for live mode.

    The pool bounds concurrent store operations; checkouts beyond
    pool_size + max_overflow wait for a free connection.
    """
    return create_async_engine(
        settings.async_database_url,
        echo=settings.DB_ECHO_QUERIES,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        connect_args=get_connect_args(settings),
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
