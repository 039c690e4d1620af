"""
Single-purpose authorization checks.

Each handler inspects the context and returns an Outcome; none of them
keep request state, so one instance can serve concurrent requests.
"""

import logging
import uuid
from abc import ABC, abstractmethod

from vacation_manager.core.authorization.context import (
    NOT_APPLICABLE,
    TARGET_USER_TEAM_ID,
    VACATION_OWNER_TEAM_ID,
    AuthorizationContext,
)
from vacation_manager.core.outcome import FailureCode, Outcome
from vacation_manager.models.vacation import Vacation

logger = logging.getLogger(__name__)


class AuthorizationHandler(ABC):
    """Base class for a link in an authorization chain."""

    @abstractmethod
    async def check(self, context: AuthorizationContext) -> Outcome:
        """Return success, or a failure carrying this handler's code."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class UserExistsHandler(AuthorizationHandler):
    """Ensures the acting user resolved to a known user."""

    async def check(self, context: AuthorizationContext) -> Outcome:
        if context.user is None:
            return Outcome.failure("User not found", FailureCode.USER_NOT_FOUND)
        return Outcome.success()


class TeamMembershipHandler(AuthorizationHandler):
    """Ensures the user is a member of a team."""

    async def check(self, context: AuthorizationContext) -> Outcome:
        if context.user is None or context.user.team_id is None:
            return Outcome.failure(
                "User must be part of a team",
                FailureCode.TEAM_MEMBERSHIP_REQUIRED,
            )
        return Outcome.success()


class ManagerRoleHandler(AuthorizationHandler):
    """Ensures the user has the manager role."""

    async def check(self, context: AuthorizationContext) -> Outcome:
        if context.user is None or not context.user.is_manager:
            return Outcome.failure(
                "Only managers can perform this operation",
                FailureCode.MANAGER_ROLE_REQUIRED,
            )
        return Outcome.success()


class VacationOwnershipHandler(AuthorizationHandler):
    """
    Ensures the user owns the vacation, or manages the owner's team.

    The vacation is ``context.resource``. The manager bypass needs
    ``VacationOwnerTeamId`` in additional data.

    A resource of ``NOT_APPLICABLE`` skips the check. Any other non-vacation
    resource is a caller mistake: lenient handlers let it through with a
    warning, strict handlers deny.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    async def check(self, context: AuthorizationContext) -> Outcome:
        resource = context.resource
        if resource is NOT_APPLICABLE:
            return Outcome.success()

        if not isinstance(resource, Vacation):
            if self.strict:
                return self._denied()
            logger.warning(
                "Ownership check skipped for %s: resource is %r, not a vacation",
                context.operation or "<unnamed>",
                type(resource).__name__,
            )
            return Outcome.success()

        user = context.user
        if user is None:
            return self._denied()

        if resource.user_id == user.id:
            return Outcome.success()

        owner_team_id = context.additional_data.get(VACATION_OWNER_TEAM_ID)
        if (
            user.is_manager
            and isinstance(owner_team_id, uuid.UUID)
            and user.team_id == owner_team_id
        ):
            return Outcome.success()

        return self._denied()

    @staticmethod
    def _denied() -> Outcome:
        return Outcome.failure(
            "You don't have permission to access this vacation",
            FailureCode.OWNERSHIP_REQUIRED,
        )

    def __repr__(self) -> str:
        return f"VacationOwnershipHandler(strict={self.strict})"


class SameTeamHandler(AuthorizationHandler):
    """
    Ensures a manager only acts on members of their own team.

    Compares ``TargetUserTeamId`` from additional data with the user's team.
    ``NOT_APPLICABLE`` skips the check. When the entry is missing or is not
    a team id, lenient handlers succeed with a warning and strict handlers
    deny.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    async def check(self, context: AuthorizationContext) -> Outcome:
        target_team_id = context.additional_data.get(TARGET_USER_TEAM_ID)
        if target_team_id is NOT_APPLICABLE:
            return Outcome.success()

        if not isinstance(target_team_id, uuid.UUID):
            if self.strict:
                return self._denied()
            logger.warning(
                "Same-team check skipped for %s: no %s in context",
                context.operation or "<unnamed>",
                TARGET_USER_TEAM_ID,
            )
            return Outcome.success()

        if context.user is None or context.user.team_id != target_team_id:
            return self._denied()

        return Outcome.success()

    @staticmethod
    def _denied() -> Outcome:
        return Outcome.failure(
            "You can only manage vacations for your team members",
            FailureCode.SAME_TEAM_REQUIRED,
        )

    def __repr__(self) -> str:
        return f"SameTeamHandler(strict={self.strict})"
