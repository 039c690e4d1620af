"""
Middleware package.
"""

from vacation_manager.middleware.auth import (
    Principal,
    get_current_user,
    get_principal,
    require_principal,
)

__all__ = [
    "Principal",
    "get_current_user",
    "get_principal",
    "require_principal",
]
