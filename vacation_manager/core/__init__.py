"""
Authorization and validation pipeline guarding vacation and team operations.
"""

from vacation_manager.core.outcome import (
    AuthorizationResult,
    FailureCode,
    Outcome,
    ValidationResult,
)

__all__ = [
    "AuthorizationResult",
    "FailureCode",
    "Outcome",
    "ValidationResult",
]
