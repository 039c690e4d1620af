"""
Authorization chain: handlers, composition and named chains.
"""

from vacation_manager.core.authorization.chain import AuthorizationChain, AuthorizationService
from vacation_manager.core.authorization.context import (
    NOT_APPLICABLE,
    TARGET_USER_TEAM_ID,
    VACATION_OWNER_TEAM_ID,
    AuthorizationContext,
)
from vacation_manager.core.authorization.factory import AuthorizationChainFactory
from vacation_manager.core.authorization.handlers import (
    AuthorizationHandler,
    ManagerRoleHandler,
    SameTeamHandler,
    TeamMembershipHandler,
    UserExistsHandler,
    VacationOwnershipHandler,
)

__all__ = [
    "AuthorizationChain",
    "AuthorizationChainFactory",
    "AuthorizationContext",
    "AuthorizationHandler",
    "AuthorizationService",
    "ManagerRoleHandler",
    "NOT_APPLICABLE",
    "SameTeamHandler",
    "TARGET_USER_TEAM_ID",
    "TeamMembershipHandler",
    "UserExistsHandler",
    "VACATION_OWNER_TEAM_ID",
    "VacationOwnershipHandler",
]
