"""
Repositories: the read/write capabilities the API and pipeline depend on.
"""

from vacation_manager.repositories.teams import TeamRepository, get_team_repository
from vacation_manager.repositories.users import UserRepository, get_user_repository
from vacation_manager.repositories.vacations import VacationRepository, get_vacation_repository

__all__ = [
    "TeamRepository",
    "UserRepository",
    "VacationRepository",
    "get_team_repository",
    "get_user_repository",
    "get_vacation_repository",
]
