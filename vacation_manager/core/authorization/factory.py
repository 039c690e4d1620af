"""
Pre-configured authorization chains.

Every call builds a fresh chain. Chains produced here use strict handlers:
a missing team id or vacation in the context denies instead of passing.
"""

from vacation_manager.core.authorization.chain import AuthorizationChain
from vacation_manager.core.authorization.handlers import (
    ManagerRoleHandler,
    SameTeamHandler,
    TeamMembershipHandler,
    UserExistsHandler,
    VacationOwnershipHandler,
)


class AuthorizationChainFactory:
    """Named chains for the operations the API exposes."""

    @staticmethod
    def view_team_pending_vacations() -> AuthorizationChain:
        """Manager who belongs to a team."""
        return AuthorizationChain.of(
            UserExistsHandler(),
            TeamMembershipHandler(),
            ManagerRoleHandler(),
        )

    @staticmethod
    def manager_operation() -> AuthorizationChain:
        """Manager role only, no team membership needed."""
        return AuthorizationChain.of(UserExistsHandler(), ManagerRoleHandler())

    @staticmethod
    def create_vacation() -> AuthorizationChain:
        return AuthorizationChain.of(UserExistsHandler(), TeamMembershipHandler())

    @staticmethod
    def vacation_ownership() -> AuthorizationChain:
        """Owner of the vacation, or a manager of the owner's team."""
        return AuthorizationChain.of(
            UserExistsHandler(),
            VacationOwnershipHandler(strict=True),
        )

    @staticmethod
    def approve_vacation() -> AuthorizationChain:
        """Manager of the same team as the vacation's owner."""
        return AuthorizationChain.of(
            UserExistsHandler(),
            ManagerRoleHandler(),
            SameTeamHandler(strict=True),
        )

    @staticmethod
    def view_team_vacations() -> AuthorizationChain:
        return AuthorizationChain.of(UserExistsHandler(), TeamMembershipHandler())
