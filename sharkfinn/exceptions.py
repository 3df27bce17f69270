"""
Custom exceptions and error handling utilities for the SharkFinn application.
"""

import re
from typing import Any, Dict, Optional


class SharkFinnException(Exception):
    """Base exception class for all SharkFinn application errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__
        super().__init__(message)


class ValidationError(SharkFinnException):
    """Raised when a required field is missing or input is malformed."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(
            message, status_code=400, details=details, error_code="VALIDATION_ERROR"
        )


class NotFoundError(SharkFinnException):
    """Raised when a resource is not found."""

    def __init__(
        self, message: str = "Not found", resource_type: Optional[str] = None
    ):
        details = {"resource_type": resource_type} if resource_type else {}
        super().__init__(
            message, status_code=404, details=details, error_code="NOT_FOUND_ERROR"
        )


class NotImplementedInModeError(SharkFinnException):
    """Raised when a write is attempted without a configured database."""

    def __init__(self, message: str = "Not implemented (no DB configured)."):
        super().__init__(message, status_code=501, error_code="NOT_IMPLEMENTED")


class DatabaseError(SharkFinnException):
    """Raised when database operations fail."""

    def __init__(
        self,
        message: str = "Database operation failed",
        operation: Optional[str] = None,
    ):
        details = {"operation": operation} if operation else {}
        super().__init__(
            message, status_code=500, details=details, error_code="DATABASE_ERROR"
        )


def extract_sql_error_message(exception: Exception) -> tuple[str, str]:
    """
    Extract meaningful error message from SQLAlchemy exceptions.

    Returns:
        tuple: (user_friendly_message, technical_details)
    """
    orig = getattr(exception, "orig", None)
    error_str = str(orig) if orig is not None else str(exception)
    lowered = error_str.lower()

    if "column" in lowered and "does not exist" in lowered:
        match = re.search(r'column "([^"]*)" does not exist', error_str)
        if match:
            return f"Database column '{match.group(1)}' does not exist", error_str
        return "Database column does not exist", error_str

    elif "relation" in lowered and "does not exist" in lowered:
        match = re.search(r'relation "([^"]*)" does not exist', error_str)
        if match:
            return f"Database table '{match.group(1)}' does not exist", error_str
        return "Database table does not exist", error_str

    elif "foreign key constraint" in lowered:
        return "Invalid reference - related record not found", error_str

    elif "not null constraint" in lowered:
        return "Required field is missing", error_str

    elif "connection" in lowered or "timeout" in lowered:
        return "Database is unavailable", error_str

    # Default fallback
    return "Database query failed", error_str
