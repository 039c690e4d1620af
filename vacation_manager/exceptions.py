"""
Custom exception hierarchy for consistent error responses.

Usage:
    from vacation_manager.exceptions import NotFoundError, ForbiddenError, raise_for_outcome

    raise NotFoundError("Vacation", vacation_id)
    raise ForbiddenError("Only managers can approve vacations")
    raise_for_outcome(outcome)  # no-op on success

These exceptions are caught by the handler registered in main.py and
converted to consistent JSON error responses with the shape:
    {"error": "<message>", "code": "<optional failure code>"}
"""

from typing import Optional

from fastapi import HTTPException, status

from vacation_manager.core.outcome import FailureCode, Outcome


class AppError(HTTPException):
    """Base application error with a default status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(
            status_code=self.__class__.status_code,
            detail=message,
        )
        self.code = str(code) if code is not None else None


class NotFoundError(AppError):
    """Resource not found (404)."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, resource_id: object = None, code: Optional[str] = None):
        if resource_id is not None:
            message = f"{resource} not found (id={resource_id})"
        else:
            message = f"{resource} not found"
        super().__init__(message, code)


class ForbiddenError(AppError):
    """Forbidden access (403)."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Access denied", code: Optional[str] = None):
        super().__init__(message, code)


class UnauthorizedError(AppError):
    """Unauthorized access (401)."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Authentication required", code: Optional[str] = None):
        super().__init__(message, code)


class ConflictError(AppError):
    """Resource conflict (409)."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message, code)


class ValidationError(AppError):
    """Validation error (400)."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message, code)


_ERRORS_BY_CODE: dict[str, type[AppError]] = {
    FailureCode.UNAUTHORIZED.value: UnauthorizedError,
    FailureCode.MANAGER_ROLE_REQUIRED.value: ForbiddenError,
    FailureCode.OWNERSHIP_REQUIRED.value: ForbiddenError,
    FailureCode.SAME_TEAM_REQUIRED.value: ForbiddenError,
    FailureCode.TEAM_MEMBERSHIP_REQUIRED.value: ValidationError,
    FailureCode.VACATION_OVERLAP.value: ConflictError,
}


def error_for_outcome(outcome: Outcome) -> AppError:
    """Translate a failed outcome into the matching application error."""
    reason = outcome.reason or "Request denied"
    if outcome.code == FailureCode.USER_NOT_FOUND:
        return NotFoundError("User", code=outcome.code)
    error_cls = _ERRORS_BY_CODE.get(outcome.code or "", ValidationError)
    return error_cls(reason, code=outcome.code)


def raise_for_outcome(outcome: Outcome) -> None:
    """Raise the application error for a failed outcome; do nothing on success."""
    if not outcome.succeeded:
        raise error_for_outcome(outcome)
