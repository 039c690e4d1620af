"""
Authentication dependencies.

Tokens are validated upstream by the identity provider / gateway, which
forwards the caller's claims as request headers. These dependencies read
those claims and resolve them to a User.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request

from vacation_manager.config import get_settings
from vacation_manager.core.outcome import FailureCode
from vacation_manager.exceptions import NotFoundError, UnauthorizedError
from vacation_manager.models.user import User
from vacation_manager.repositories.users import UserRepository, get_user_repository


@dataclass(frozen=True)
class Principal:
    """Claims of the authenticated caller."""

    entra_id: str
    email: Optional[str] = None
    name: Optional[str] = None


async def get_principal(request: Request) -> Optional[Principal]:
    """
    Extract the caller's claims from the identity headers.

    Returns None when no object id is present (anonymous request).
    """
    settings = get_settings()
    entra_id = request.headers.get(settings.identity_object_id_header)
    if not entra_id:
        return None

    return Principal(
        entra_id=entra_id,
        email=request.headers.get(settings.identity_email_header) or None,
        name=request.headers.get(settings.identity_name_header) or None,
    )


async def require_principal(
    principal: Optional[Principal] = Depends(get_principal),
) -> Principal:
    """
    Require an authenticated caller.

    Raises 401 if the identity headers are missing.
    """
    if principal is None:
        raise UnauthorizedError("User not authenticated", code=FailureCode.UNAUTHORIZED)
    return principal


async def get_current_user(
    principal: Principal = Depends(require_principal),
    users: UserRepository = Depends(get_user_repository),
) -> User:
    """
    Get current authenticated user.

    Raises 401 if not authenticated, 404 if the caller never registered
    (see GET /users/me).
    """
    user = await users.get_by_entra_id(principal.entra_id)
    if user is None:
        raise NotFoundError("User", code=FailureCode.USER_NOT_FOUND)
    return user
