"""
API routers package.
"""

from vacation_manager.routers import (
    health,
    teams,
    users,
    vacations,
)

__all__ = [
    "health",
    "teams",
    "users",
    "vacations",
]
