"""
Business rules checked before a vacation is persisted.

Rules are independent of each other. ``order`` only fixes the sequence
in which the validation service evaluates them (lower runs first).
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import date
from typing import TYPE_CHECKING, Protocol

from vacation_manager.core.outcome import FailureCode, Outcome
from vacation_manager.models.vacation import VacationStatus

if TYPE_CHECKING:
    from vacation_manager.models.user import User
    from vacation_manager.models.vacation import Vacation


def vacations_overlap(a_start: date, a_end: date, b_start: date, b_end: date) -> bool:
    """Closed-interval overlap; ranges sharing a boundary day overlap."""
    return a_start <= b_end and a_end >= b_start


class VacationLookup(Protocol):
    """Read access to a user's vacations (implemented by VacationRepository)."""

    async def get_by_user_id(self, user_id: uuid.UUID) -> Sequence[Vacation]: ...


class VacationValidationRule(ABC):
    """A single business rule for a vacation request."""

    order: int = 0

    @abstractmethod
    async def validate(self, vacation: Vacation, user: User) -> Outcome:
        """Validate ``vacation`` requested by ``user``."""


class TeamMembershipRule(VacationValidationRule):
    """The requesting user must belong to a team."""

    order = 1

    async def validate(self, vacation: Vacation, user: User) -> Outcome:
        if user.team_id is None:
            return Outcome.failure(
                "User must be part of a team to request vacation",
                FailureCode.TEAM_MEMBERSHIP_REQUIRED,
            )
        return Outcome.success()


class VacationOverlapRule(VacationValidationRule):
    """
    The request must not overlap one of the user's approved vacations.

    Pending, rejected and cancelled vacations never conflict. The
    candidate's own stored record is excluded by id, so re-validating an
    edited vacation does not collide with itself. Lookup errors propagate.
    """

    order = 2

    def __init__(self, vacations: VacationLookup):
        self.vacations = vacations

    async def validate(self, vacation: Vacation, user: User) -> Outcome:
        existing = await self.vacations.get_by_user_id(user.id)

        has_overlap = any(
            v.id != vacation.id
            and v.status == VacationStatus.APPROVED
            and vacations_overlap(v.start_date, v.end_date, vacation.start_date, vacation.end_date)
            for v in existing
        )

        if has_overlap:
            return Outcome.failure(
                "You have overlapping approved vacations in this date range",
                FailureCode.VACATION_OVERLAP,
            )
        return Outcome.success()
