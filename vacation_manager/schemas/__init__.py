"""
Pydantic schemas for request/response validation.
"""

from vacation_manager.schemas.team import TeamCreate, TeamResponse, TeamUpdate
from vacation_manager.schemas.user import UserRegistration, UserResponse, UserUpdate
from vacation_manager.schemas.vacation import (
    VacationApprove,
    VacationCreate,
    VacationResponse,
    VacationUpdate,
)

__all__ = [
    # Teams
    "TeamCreate",
    "TeamResponse",
    "TeamUpdate",
    # Users
    "UserRegistration",
    "UserResponse",
    "UserUpdate",
    # Vacations
    "VacationApprove",
    "VacationCreate",
    "VacationResponse",
    "VacationUpdate",
]
