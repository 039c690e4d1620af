"""
Composable in-memory filters over vacations.

Specifications are callables, so they plug straight into ``filter()``:

    pending_in_june = PendingVacationsSpecification() & DateRangeSpecification(
        date(2025, 6, 1), date(2025, 6, 30)
    )
    vacations = [v for v in vacations if pending_in_june(v)]

They combine with ``&``, ``|`` and ``~``.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import date
from typing import Optional

from vacation_manager.core.validation.rules import vacations_overlap
from vacation_manager.models.vacation import Vacation, VacationStatus, VacationType


class Specification(ABC):
    """Predicate over a vacation."""

    @abstractmethod
    def is_satisfied_by(self, vacation: Vacation) -> bool: ...

    def __call__(self, vacation: Vacation) -> bool:
        return self.is_satisfied_by(vacation)

    def __and__(self, other: Specification) -> Specification:
        return _AndSpecification(self, other)

    def __or__(self, other: Specification) -> Specification:
        return _OrSpecification(self, other)

    def __invert__(self) -> Specification:
        return _NotSpecification(self)


class _AndSpecification(Specification):
    def __init__(self, left: Specification, right: Specification):
        self.left = left
        self.right = right

    def is_satisfied_by(self, vacation: Vacation) -> bool:
        return self.left.is_satisfied_by(vacation) and self.right.is_satisfied_by(vacation)


class _OrSpecification(Specification):
    def __init__(self, left: Specification, right: Specification):
        self.left = left
        self.right = right

    def is_satisfied_by(self, vacation: Vacation) -> bool:
        return self.left.is_satisfied_by(vacation) or self.right.is_satisfied_by(vacation)


class _NotSpecification(Specification):
    def __init__(self, inner: Specification):
        self.inner = inner

    def is_satisfied_by(self, vacation: Vacation) -> bool:
        return not self.inner.is_satisfied_by(vacation)


class DateRangeSpecification(Specification):
    """Vacations touching the inclusive range [start_date, end_date]."""

    def __init__(self, start_date: date, end_date: date):
        self.start_date = start_date
        self.end_date = end_date

    def is_satisfied_by(self, vacation: Vacation) -> bool:
        return vacations_overlap(
            vacation.start_date, vacation.end_date, self.start_date, self.end_date
        )


class VacationStatusSpecification(Specification):
    def __init__(self, status: VacationStatus):
        self.status = status

    def is_satisfied_by(self, vacation: Vacation) -> bool:
        return vacation.status == self.status


class PendingVacationsSpecification(VacationStatusSpecification):
    def __init__(self):
        super().__init__(VacationStatus.PENDING)


class ApprovedVacationsSpecification(VacationStatusSpecification):
    def __init__(self):
        super().__init__(VacationStatus.APPROVED)


class VacationTypeSpecification(Specification):
    def __init__(self, vacation_type: VacationType):
        self.vacation_type = vacation_type

    def is_satisfied_by(self, vacation: Vacation) -> bool:
        return vacation.type == self.vacation_type


class UserSpecification(Specification):
    def __init__(self, user_id: uuid.UUID):
        self.user_id = user_id

    def is_satisfied_by(self, vacation: Vacation) -> bool:
        return vacation.user_id == self.user_id


class TeamSpecification(Specification):
    """
    Vacations whose owner belongs to ``team_id``.

    Membership comes from a user id -> team id mapping so the filter works
    on vacations loaded without their user relationship.
    """

    def __init__(self, team_id: uuid.UUID, user_teams: Mapping[uuid.UUID, Optional[uuid.UUID]]):
        self.team_id = team_id
        self.user_teams = user_teams

    def is_satisfied_by(self, vacation: Vacation) -> bool:
        return self.user_teams.get(vacation.user_id) == self.team_id
