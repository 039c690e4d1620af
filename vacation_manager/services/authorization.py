"""
Authorization helper for routers.

Resolves the calling principal to a User, builds the AuthorizationContext
for the requested operation, and runs the matching chain. Every method
returns ``(user, outcome)``; ``user`` is None when the caller could not be
resolved.
"""

import logging
import uuid
from typing import Optional

from fastapi import Depends

from vacation_manager.core.authorization import (
    AuthorizationChain,
    AuthorizationChainFactory,
    AuthorizationContext,
    AuthorizationService,
    UserExistsHandler,
)
from vacation_manager.core.outcome import FailureCode, Outcome
from vacation_manager.middleware.auth import Principal, get_principal
from vacation_manager.models.user import User
from vacation_manager.models.vacation import Vacation
from vacation_manager.repositories.users import UserRepository, get_user_repository

logger = logging.getLogger(__name__)

AuthResult = tuple[Optional[User], Outcome]


class AuthorizationHelper:
    """Authorization checks bound to one request's principal."""

    def __init__(
        self,
        principal: Optional[Principal],
        users: UserRepository,
        service: Optional[AuthorizationService] = None,
    ):
        self.principal = principal
        self.users = users
        self.service = service or AuthorizationService()
        self._user: Optional[User] = None

    async def get_current_user(self) -> Optional[User]:
        """The caller's User, without any authorization checks."""
        if self.principal is None:
            return None
        if self._user is None:
            self._user = await self.users.get_by_entra_id(self.principal.entra_id)
        return self._user

    async def _run(self, chain: AuthorizationChain, context: AuthorizationContext) -> AuthResult:
        if self.principal is None:
            return None, Outcome.failure("Unauthorized", FailureCode.UNAUTHORIZED)

        user = await self.get_current_user()
        if user is None:
            return None, Outcome.failure("User not found", FailureCode.USER_NOT_FOUND)

        context.user = user
        return user, await self.service.authorize(chain, context)

    async def authorize_create_vacation(self) -> AuthResult:
        """Caller is registered and belongs to a team."""
        return await self._run(
            AuthorizationChainFactory.create_vacation(),
            AuthorizationContext.for_user(None, "CreateVacation"),
        )

    async def authorize_team_operation(self) -> AuthResult:
        return await self._run(
            AuthorizationChainFactory.view_team_vacations(),
            AuthorizationContext.for_user(None, "TeamOperation"),
        )

    async def authorize_team_pending(self) -> AuthResult:
        return await self._run(
            AuthorizationChainFactory.view_team_pending_vacations(),
            AuthorizationContext.for_user(None, "ViewTeamPendingVacations"),
        )

    async def authorize_manager_operation(self) -> AuthResult:
        return await self._run(
            AuthorizationChainFactory.manager_operation(),
            AuthorizationContext.for_user(None, "ManagerOperation"),
        )

    async def authorize_vacation_ownership(
        self,
        vacation: Vacation,
        owner_team_id: Optional[uuid.UUID] = None,
    ) -> AuthResult:
        """Owner of ``vacation``; with ``owner_team_id``, also that team's managers."""
        return await self._run(
            AuthorizationChainFactory.vacation_ownership(),
            AuthorizationContext.for_vacation_access(None, vacation, owner_team_id),
        )

    async def authorize_approval(self, target_team_id: Optional[uuid.UUID]) -> AuthResult:
        """Manager of ``target_team_id`` (the vacation owner's team)."""
        return await self._run(
            AuthorizationChainFactory.approve_vacation(),
            AuthorizationContext.for_approval(None, target_team_id),
        )

    async def ensure_authenticated(self) -> AuthResult:
        """Caller is registered; team membership not required."""
        return await self._run(
            AuthorizationChain.of(UserExistsHandler()),
            AuthorizationContext.for_user(None, "Authenticated"),
        )

    async def ensure_team_member_or_manager(self, team_id: uuid.UUID) -> AuthResult:
        """Caller belongs to ``team_id`` or is a manager."""
        user, outcome = await self.ensure_authenticated()
        if not outcome.is_authorized or user is None:
            return user, outcome

        if user.is_manager or user.team_id == team_id:
            return user, Outcome.success()

        logger.info("User %s denied access to team %s", user.id, team_id)
        return user, Outcome.failure(
            "User is not a member of this team and is not a manager",
            FailureCode.SAME_TEAM_REQUIRED,
        )


async def get_authorization_helper(
    principal: Optional[Principal] = Depends(get_principal),
    users: UserRepository = Depends(get_user_repository),
) -> AuthorizationHelper:
    """FastAPI dependency providing a request-scoped AuthorizationHelper."""
    return AuthorizationHelper(principal, users)
