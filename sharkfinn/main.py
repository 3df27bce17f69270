from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from sharkfinn.api.router import api_router
from sharkfinn.bootstrap import start_database
from sharkfinn.config import Settings, settings as default_settings
from sharkfinn.database import create_session_factory
from sharkfinn.exceptions import SharkFinnException, extract_sql_error_message
from sharkfinn.utils.logger import configure_logger

logger = structlog.get_logger()


def error_response(status_code: int, message: str) -> JSONResponse:
    """Every error shares the {ok: false, error: <message>} shape."""
    return JSONResponse(status_code=status_code, content={"ok": False, "error": message})


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI application."""
    settings: Settings = app.state.settings
    logger.info(
        "Starting up FastAPI application",
        mode="live" if settings.has_db else "static",
    )

    engine = None
    if settings.has_db:
        # Runs once; a failure leaves the app up and requests fail individually
        engine = await start_database(settings)
        if engine is not None:
            app.state.session_factory = create_session_factory(engine)

    try:
        yield
    finally:
        if engine is not None:
            await engine.dispose()
        logger.info("Shutting down FastAPI application")


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(SharkFinnException)
    async def sharkfinn_exception_handler(
        request: Request, exc: SharkFinnException
    ) -> JSONResponse:
        """Handle custom SharkFinn application exceptions."""
        logger.error(
            "SharkFinn application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            details=exc.details,
            path=request.url.path,
            method=request.method,
        )
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed bodies and path parameters are client input errors."""
        logger.error(
            "Validation error",
            errors=exc.errors(),
            path=request.url.path,
            method=request.method,
        )

        formatted_errors = []
        for error in exc.errors():
            field_path = ".".join(
                str(loc) for loc in error["loc"] if loc not in ("body", "path")
            )
            message = error["msg"]
            formatted_errors.append(f"{field_path}: {message}" if field_path else message)

        return error_response(400, "; ".join(formatted_errors) or "Invalid request")

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        """Handle SQLAlchemy errors that escape the repositories."""
        user_message, technical_details = extract_sql_error_message(exc)

        logger.exception(
            "Database error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            method=request.method,
            technical_details=technical_details,
        )
        return error_response(500, user_message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle routing errors such as unknown API paths."""
        logger.error(
            "HTTP error",
            status_code=exc.status_code,
            detail=exc.detail,
            path=request.url.path,
            method=request.method,
        )
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler for all unhandled exceptions."""
        logger.exception(
            "Unhandled exception",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            method=request.method,
        )

        message = "An unexpected error occurred. Please try again later."
        if request.app.state.settings.ENVIRONMENT == "local":
            message = f"{type(exc).__name__}: {exc}"
        return error_response(500, message)


def register_frontend(app: FastAPI, static_dir: Path, api_prefix: str) -> None:
    """Serve the pre-built frontend and fall back to its app shell."""
    root = static_dir.resolve()
    api_root = api_prefix.strip("/")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str):
        if full_path == api_root or full_path.startswith(f"{api_root}/"):
            raise StarletteHTTPException(status_code=404, detail="Not Found")

        candidate = (root / full_path).resolve()
        if full_path and candidate.is_relative_to(root) and candidate.is_file():
            return FileResponse(candidate)

        index = root / "index.html"
        if not index.is_file():
            raise StarletteHTTPException(status_code=404, detail="Not Found")
        return FileResponse(index)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application for the given settings.

    The database mode is decided here once, from settings.DATABASE_URL, and
    stays fixed for the lifetime of the returned app.
    """
    settings = settings or default_settings
    configure_logger()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=settings.API_PREFIX)
    register_frontend(app, Path(settings.STATIC_DIR), settings.API_PREFIX)

    return app


app = create_app()
