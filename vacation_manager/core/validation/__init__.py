"""
Vacation validation: business rules and the service that runs them.
"""

from vacation_manager.core.validation.rules import (
    TeamMembershipRule,
    VacationLookup,
    VacationOverlapRule,
    VacationValidationRule,
    vacations_overlap,
)
from vacation_manager.core.validation.service import VacationValidationService

__all__ = [
    "TeamMembershipRule",
    "VacationLookup",
    "VacationOverlapRule",
    "VacationValidationRule",
    "VacationValidationService",
    "vacations_overlap",
]
