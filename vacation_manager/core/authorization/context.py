"""
Per-request input for an authorization pass.

Handlers that need more than the acting user read typed entries from
``additional_data``. Use the ``for_*`` constructors so each chain gets the
entries it needs; pass ``NOT_APPLICABLE`` to skip a check on purpose rather
than leaving the entry out.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Union

if TYPE_CHECKING:
    from vacation_manager.models.user import User
    from vacation_manager.models.vacation import Vacation


TARGET_USER_TEAM_ID = "TargetUserTeamId"
VACATION_OWNER_TEAM_ID = "VacationOwnerTeamId"


class _NotApplicable:
    """Marker: the caller states that a check does not apply to this request."""

    _instance: Optional[_NotApplicable] = None

    def __new__(cls) -> _NotApplicable:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_APPLICABLE"

    def __bool__(self) -> bool:
        return False


NOT_APPLICABLE = _NotApplicable()

TeamRef = Union[uuid.UUID, _NotApplicable]


@dataclass
class AuthorizationContext:
    """Acting user plus whatever the handlers in the chain need to decide."""

    user: Optional["User"]
    operation: str = ""
    resource: Any = None
    additional_data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_user(cls, user: Optional["User"], operation: str = "UserOperation") -> AuthorizationContext:
        """Context for chains that only look at the acting user."""
        return cls(user=user, operation=operation)

    @classmethod
    def for_approval(
        cls,
        user: Optional["User"],
        target_team_id: Optional[TeamRef],
        operation: str = "ApproveVacation",
    ) -> AuthorizationContext:
        """
        Context for the approve-vacation chain.

        ``target_team_id`` is the team of the vacation's owner. ``None`` means
        the owner has no team, which never matches the manager's team.
        """
        return cls(
            user=user,
            operation=operation,
            additional_data={TARGET_USER_TEAM_ID: target_team_id},
        )

    @classmethod
    def for_vacation_access(
        cls,
        user: Optional["User"],
        vacation: Union["Vacation", _NotApplicable],
        owner_team_id: Optional[uuid.UUID] = None,
        operation: str = "VacationOwnership",
    ) -> AuthorizationContext:
        """
        Context for the vacation-ownership chain.

        Supplying ``owner_team_id`` lets a manager of that team act on the
        vacation; without it only the owner passes.
        """
        additional_data: dict[str, Any] = {}
        if owner_team_id is not None:
            additional_data[VACATION_OWNER_TEAM_ID] = owner_team_id
        return cls(
            user=user,
            operation=operation,
            resource=vacation,
            additional_data=additional_data,
        )
