from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

# Drivers that are rewritten to the async driver used by the app
_POSTGRES_DRIVERS = {"postgres", "postgresql", "postgresql+psycopg2", "postgresql+asyncpg"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True,
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # App Settings
    ENVIRONMENT: str = "local"
    PROJECT_NAME: str = "SharkFinn Learning"
    API_PREFIX: str = "/api"

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    STATIC_DIR: str = "public"
    CORS_ORIGINS: List[str] = ["*"]

    # Database Settings, no DATABASE_URL means static mode
    DATABASE_URL: Optional[str] = None
    DB_ECHO_QUERIES: bool = False
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 5
    DB_CONNECT_TIMEOUT: float = 10.0

    @property
    def has_db(self) -> bool:
        """Whether a database is configured (live mode)."""
        return bool(self.DATABASE_URL)

    @property
    def db_ssl_mode(self) -> Optional[str]:
        """The libpq `sslmode` from DATABASE_URL, if any."""
        if not self.has_db:
            return None
        mode = make_url(self.DATABASE_URL).query.get("sslmode")
        if isinstance(mode, tuple):
            mode = mode[-1]
        return mode.lower() if mode else None

    @property
    def async_database_url(self) -> str:
        """Builds the asyncpg database URI from DATABASE_URL.

        Raises:
            ValueError: If no database is configured or the URL is not Postgres
        """
        if not self.has_db:
            raise ValueError("DATABASE_URL is not configured")

        url = make_url(self.DATABASE_URL)
        if url.drivername not in _POSTGRES_DRIVERS:
            raise ValueError(f"Unsupported database driver: {url.drivername}")

        # asyncpg does not understand libpq's sslmode, TLS goes through connect_args
        return url.set(drivername="postgresql+asyncpg").difference_update_query(
            ["sslmode"]
        ).render_as_string(hide_password=False)


settings = Settings()
