"""
Wiring for the vacation validation service.
"""

from fastapi import Depends

from vacation_manager.core.validation import VacationValidationService
from vacation_manager.repositories.vacations import VacationRepository, get_vacation_repository


async def get_vacation_validation_service(
    vacations: VacationRepository = Depends(get_vacation_repository),
) -> VacationValidationService:
    """FastAPI dependency: the standard rules backed by the request's repository."""
    return VacationValidationService.default(vacations)
