"""
Users API router.
Profile, self-registration and team membership management.
"""

import logging
import uuid
from typing import List

import pydantic
from fastapi import APIRouter, Depends

from vacation_manager.core.outcome import FailureCode
from vacation_manager.exceptions import ConflictError, NotFoundError, raise_for_outcome
from vacation_manager.middleware.auth import Principal, get_current_user, require_principal
from vacation_manager.models.user import User
from vacation_manager.repositories.teams import TeamRepository, get_team_repository
from vacation_manager.repositories.users import UserRepository, get_user_repository
from vacation_manager.schemas.user import UserRegistration, UserResponse, UserUpdate
from vacation_manager.services.authorization import AuthorizationHelper, get_authorization_helper

logger = logging.getLogger(__name__)

router = APIRouter()


async def get_user_or_404(users: UserRepository, user_id: uuid.UUID) -> User:
    user = await users.get_by_id(user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return user


async def ensure_team_exists(teams: TeamRepository, team_id: uuid.UUID) -> None:
    if await teams.get_by_id(team_id) is None:
        raise NotFoundError("Team", team_id)


@router.get("/users/me", response_model=UserResponse)
async def get_me(
    principal: Principal = Depends(require_principal),
    users: UserRepository = Depends(get_user_repository),
):
    """
    Get the caller's profile, registering them on first sign-in.

    The identity claims must carry a valid email and a display name.
    The very first registered user becomes a manager.
    """
    user = await users.get_by_entra_id(principal.entra_id)
    if user is not None:
        return user

    try:
        registration = UserRegistration(
            entra_id=principal.entra_id,
            email=principal.email,
            display_name=principal.name,
        )
    except pydantic.ValidationError:
        logger.warning("Cannot auto-register %s: incomplete identity claims", principal.entra_id)
        raise NotFoundError("User", code=FailureCode.USER_NOT_FOUND)

    if await users.get_by_email(registration.email) is not None:
        logger.warning(
            "Cannot auto-register %s: email %s belongs to another account",
            principal.entra_id,
            registration.email,
        )
        raise ConflictError("A user with this email is already registered")

    is_first_user = await users.count() == 0
    user = User(
        id=uuid.uuid4(),
        entra_id=registration.entra_id,
        email=registration.email,
        display_name=registration.display_name,
        is_manager=is_first_user,
    )
    user = await users.create(user)
    logger.info("Registered user %s (%s), manager=%s", user.email, user.id, is_first_user)

    return user


@router.put("/users/me", response_model=UserResponse)
async def update_me(
    data: UserUpdate,
    user: User = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
):
    """Update the caller's display name and department."""
    if data.display_name is not None:
        user.display_name = data.display_name
    if data.department is not None:
        user.department = data.department or None

    return await users.update(user)


@router.post("/users/team/{team_id}", response_model=UserResponse)
async def join_team(
    team_id: uuid.UUID,
    user: User = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
    teams: TeamRepository = Depends(get_team_repository),
):
    """Join a team, leaving the current one if any."""
    await ensure_team_exists(teams, team_id)

    user.team_id = team_id
    updated = await users.update(user)
    logger.info("User %s joined team %s", user.id, team_id)

    return updated


@router.delete("/users/team", response_model=UserResponse)
async def leave_team(
    user: User = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
):
    """Leave the current team."""
    previous = user.team_id
    user.team_id = None
    updated = await users.update(user)
    logger.info("User %s left team %s", user.id, previous)

    return updated


@router.get("/users/team/{team_id}", response_model=List[UserResponse])
async def get_team_members(
    team_id: uuid.UUID,
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    users: UserRepository = Depends(get_user_repository),
):
    """List members of a team. Open to members of that team and to managers."""
    _, outcome = await auth.ensure_team_member_or_manager(team_id)
    raise_for_outcome(outcome)

    return await users.get_by_team(team_id)


@router.get("/users", response_model=List[UserResponse])
async def get_users(
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    users: UserRepository = Depends(get_user_repository),
):
    """List all users (managers only)."""
    _, outcome = await auth.authorize_manager_operation()
    raise_for_outcome(outcome)

    return await users.get_all()


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: uuid.UUID,
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    users: UserRepository = Depends(get_user_repository),
):
    """Get a user by id."""
    _, outcome = await auth.ensure_authenticated()
    raise_for_outcome(outcome)

    return await get_user_or_404(users, user_id)


@router.put("/users/{user_id}/team/{team_id}", response_model=UserResponse)
async def assign_user_to_team(
    user_id: uuid.UUID,
    team_id: uuid.UUID,
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    users: UserRepository = Depends(get_user_repository),
    teams: TeamRepository = Depends(get_team_repository),
):
    """Move a user into a team (managers only)."""
    manager, outcome = await auth.authorize_manager_operation()
    raise_for_outcome(outcome)

    user = await get_user_or_404(users, user_id)
    await ensure_team_exists(teams, team_id)

    user.team_id = team_id
    updated = await users.update(user)
    logger.info("User %s assigned to team %s by %s", user_id, team_id, manager.id)

    return updated


@router.delete("/users/{user_id}/team", response_model=UserResponse)
async def remove_user_from_team(
    user_id: uuid.UUID,
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    users: UserRepository = Depends(get_user_repository),
):
    """Remove a user from their team (managers only)."""
    manager, outcome = await auth.authorize_manager_operation()
    raise_for_outcome(outcome)

    user = await get_user_or_404(users, user_id)
    user.team_id = None
    updated = await users.update(user)
    logger.info("User %s removed from team by %s", user_id, manager.id)

    return updated
