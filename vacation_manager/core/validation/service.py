"""
Runs the registered vacation rules.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from vacation_manager.core.outcome import Outcome
from vacation_manager.core.validation.rules import (
    TeamMembershipRule,
    VacationLookup,
    VacationOverlapRule,
    VacationValidationRule,
)

if TYPE_CHECKING:
    from vacation_manager.models.user import User
    from vacation_manager.models.vacation import Vacation

logger = logging.getLogger(__name__)


class VacationValidationService:
    """
    Evaluates rules in ascending ``order``.

    Equal orders are allowed; those rules run in registration order
    (``sorted`` is stable).
    """

    def __init__(self, rules: Iterable[VacationValidationRule]):
        self._rules: tuple[VacationValidationRule, ...] = tuple(
            sorted(rules, key=lambda rule: rule.order)
        )

    @classmethod
    def default(cls, vacations: VacationLookup) -> VacationValidationService:
        """Service with the standard rules wired to a vacation lookup."""
        return cls([TeamMembershipRule(), VacationOverlapRule(vacations)])

    @property
    def rules(self) -> tuple[VacationValidationRule, ...]:
        return self._rules

    async def validate(self, vacation: Vacation, user: User) -> Outcome:
        """Return the first failure, or success if every rule passes."""
        for rule in self._rules:
            outcome = await rule.validate(vacation, user)
            if not outcome.is_valid:
                logger.info(
                    "Vacation %s rejected by %s: %s",
                    vacation.id,
                    type(rule).__name__,
                    outcome.code,
                )
                return outcome
        return Outcome.success()

    async def validate_all(self, vacation: Vacation, user: User) -> list[Outcome]:
        """Run every rule and return all failures (empty list means valid)."""
        failures = []
        for rule in self._rules:
            outcome = await rule.validate(vacation, user)
            if not outcome.is_valid:
                failures.append(outcome)
        return failures
