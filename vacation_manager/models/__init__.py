"""
SQLAlchemy models package.
All models inherit from the Base class defined in database.py.
"""

from vacation_manager.models.team import Team
from vacation_manager.models.user import User
from vacation_manager.models.vacation import Vacation, VacationStatus, VacationType

__all__ = [
    "Team",
    "User",
    "Vacation",
    "VacationStatus",
    "VacationType",
]
