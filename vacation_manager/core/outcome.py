"""
Outcome of an authorization or validation check.

Both the authorization chain and the validation rule set report their
verdict as data. A failed check is never an exception: callers inspect
the outcome and decide how to respond (see exceptions.raise_for_outcome).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FailureCode(str, Enum):
    """Machine-readable codes carried by failed outcomes."""

    UNAUTHORIZED = "UNAUTHORIZED"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    TEAM_MEMBERSHIP_REQUIRED = "TEAM_MEMBERSHIP_REQUIRED"
    MANAGER_ROLE_REQUIRED = "MANAGER_ROLE_REQUIRED"
    OWNERSHIP_REQUIRED = "OWNERSHIP_REQUIRED"
    SAME_TEAM_REQUIRED = "SAME_TEAM_REQUIRED"
    VACATION_OVERLAP = "VACATION_OVERLAP"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Outcome:
    """
    Immutable result of a check.

    Use the factories; a success never carries a reason or code.
    """

    succeeded: bool
    reason: Optional[str] = None
    code: Optional[str] = None

    @classmethod
    def success(cls) -> Outcome:
        return _SUCCESS

    @classmethod
    def failure(cls, reason: str, code: Optional[str] = None) -> Outcome:
        return cls(False, reason, str(code) if code is not None else None)

    @property
    def is_authorized(self) -> bool:
        return self.succeeded

    @property
    def is_valid(self) -> bool:
        return self.succeeded

    def __bool__(self) -> bool:
        return self.succeeded


_SUCCESS = Outcome(True)

# Both pipelines share the one type
AuthorizationResult = Outcome
ValidationResult = Outcome
