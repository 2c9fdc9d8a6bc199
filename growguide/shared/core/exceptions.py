# 📄 File: growguide/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# Names every way a GrowGuide request can fail (not logged in, bad input, unknown setup,
# day already logged, database trouble) so each failure gets a clear, consistent answer.
# 🧪 Purpose (Technical Summary):
# Exception hierarchy carrying HTTP status, machine-readable error code and a details
# mapping; rendered into the JSON error envelope by the API exception handlers.
# 🔗 Dependencies:
# FastAPI status constants
# 🔄 Connected Modules / Calls From:
# Domain services, application handlers, session manager, API error handlers

from datetime import date
from typing import Any, Dict, Optional, Union

from fastapi import HTTPException, status


def _with(details: Optional[Dict[str, Any]], **fields: Any) -> Dict[str, Any]:
    """Copy ``details`` and add every field that was actually given."""
    merged = dict(details or {})
    merged.update({key: value for key, value in fields.items() if value is not None})
    return merged


class GrowGuideException(Exception):
    """
    Base exception class for the GrowGuide service.

    ``error_code`` defaults to the upper-cased class name; subclasses pin
    their own so clients can rely on it.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: Optional[str] = None

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code or type(self).status_code
        self.details = details or {}
        self.error_code = error_code or type(self).error_code or type(self).__name__.upper()
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code,
            }
        }


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------

class AuthenticationError(GrowGuideException):
    """The upstream auth layer did not supply a usable caller identity."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "AUTHENTICATION_ERROR"

    def __init__(self, message: str = "Authentication failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)


class ValidationError(GrowGuideException):
    """
    Input that parsed but breaks a business rule: missing date, override
    outside the total, distribution naming a non-member.
    """

    status_code = 422
    error_code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            details=_with(
                details,
                field=field,
                value=str(value) if value is not None else None,
                constraint=constraint,
            ),
        )


class NotFoundError(GrowGuideException):
    """Missing, or owned by someone else; the two are not distinguished."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[Union[int, str]] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            details=_with(
                details,
                resource_type=resource_type,
                resource_id=str(resource_id) if resource_id is not None else None,
            ),
        )


class ConflictError(GrowGuideException):
    status_code = status.HTTP_409_CONFLICT
    error_code = "CONFLICT_ERROR"

    def __init__(
        self,
        message: str = "Resource conflict",
        resource_type: Optional[str] = None,
        conflict_field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            details=_with(details, resource_type=resource_type, conflict_field=conflict_field),
        )


# -----------------------------------------------------------------------------
# Storage errors
# -----------------------------------------------------------------------------

class DatabaseError(GrowGuideException):
    """Engine or session unavailable, or a read failed."""

    error_code = "DATABASE_ERROR"

    def __init__(
        self,
        message: str = "Database error",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=_with(details, operation=operation))


class RepositoryError(GrowGuideException):
    """A repository statement failed; the surrounding transaction rolls back."""

    error_code = "REPOSITORY_ERROR"

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: Optional[str] = None,
        entity: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=_with(details, operation=operation, entity=entity))


class TransactionError(GrowGuideException):
    """
    A unit of work failed for a reason the domain did not anticipate.

    Always raised after the rollback, so nothing of the unit of work is
    stored.
    """

    error_code = "TRANSACTION_ERROR"

    def __init__(
        self,
        message: str = "Database transaction failed",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=_with(details, operation=operation))


# -----------------------------------------------------------------------------
# Cultivation
# -----------------------------------------------------------------------------

class SetupNotFoundError(NotFoundError):

    def __init__(self, setup_id: int, user_id: Optional[int] = None):
        super().__init__(
            f"Setup not found: {setup_id}",
            resource_type="setup",
            resource_id=setup_id,
            details=_with(None, setup_id=setup_id, user_id=user_id),
        )


class DayEntryNotFoundError(NotFoundError):
    """Setup day entry id does not resolve within the given setup."""

    def __init__(self, day_entry_id: int, setup_id: Optional[int] = None):
        super().__init__(
            f"Setup day entry not found: {day_entry_id}",
            resource_type="setup_day_entry",
            resource_id=day_entry_id,
            details=_with(None, day_entry_id=day_entry_id, setup_id=setup_id),
        )


class SetupDayConflictError(ConflictError):
    """
    The setup already has a day entry for the date.

    Carries the existing entry (JSON-ready) so callers can show it
    instead of the rejected submission.
    """

    def __init__(
        self,
        setup_id: int,
        entry_date: date,
        existing_day_entry: Optional[Dict[str, Any]] = None,
    ):
        self.setup_id = setup_id
        self.entry_date = entry_date
        self.existing_day_entry = existing_day_entry

        super().__init__(
            f"A day entry for {entry_date.isoformat()} already exists in this setup",
            resource_type="setup_day_entry",
            conflict_field="date",
            details=_with(
                None,
                setup_id=setup_id,
                date=entry_date.isoformat(),
                existing_day_entry=existing_day_entry,
            ),
        )


def is_client_error(exception: Exception) -> bool:
    """True for 4xx GrowGuide and HTTP exceptions."""
    if isinstance(exception, (GrowGuideException, HTTPException)):
        return 400 <= exception.status_code < 500
    return False
