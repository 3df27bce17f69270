"""
Error handling utilities for repository operations.
"""

import json
from functools import wraps
from typing import Any, Callable

import structlog

from sharkfinn.exceptions import (
    DatabaseError,
    SharkFinnException,
    extract_sql_error_message,
)

logger = structlog.get_logger()


def handle_database_errors(operation_name: str):
    """
    Decorator for SQL repository methods. Rolls back the repository session
    and re-raises unexpected failures as DatabaseError.

    Args:
        operation_name: Name of the operation for error logging
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(self, *args, **kwargs):
            try:
                return await func(self, *args, **kwargs)
            except SharkFinnException:
                # Re-raise custom exceptions as-is
                raise
            except Exception as e:
                await self.db.rollback()
                user_message, technical_details = extract_sql_error_message(e)
                logger.exception(
                    f"Unexpected error in {operation_name}",
                    error=user_message,
                    error_type=type(e).__name__,
                    technical_details=technical_details,
                )
                raise DatabaseError(
                    f"Failed to {operation_name}: {user_message}",
                    operation=operation_name,
                ) from e

        return wrapper

    return decorator


def decode_json(value: Any) -> Any:
    """JSONB columns come back as text through raw statements."""
    if isinstance(value, (str, bytes)):
        return json.loads(value)
    return value
