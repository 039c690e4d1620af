"""
User model.
Maps to the users table in PostgreSQL.
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vacation_manager.database import Base
from vacation_manager.models.base import utcnow

if TYPE_CHECKING:
    from vacation_manager.models.team import Team
    from vacation_manager.models.vacation import Vacation


class User(Base):
    """User model - an employee, identified by their external (Entra) identity."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    entra_id: Mapped[str] = mapped_column(String(256), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(256), unique=True, nullable=False)
    display_name: Mapped[str] = mapped_column(String(256), nullable=False)
    department: Mapped[Optional[str]] = mapped_column(String(256), nullable=True)
    # At most one team at a time
    team_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("teams.id", ondelete="SET NULL"),
        nullable=True,
    )
    is_manager: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow, nullable=False
    )

    # Relationships
    team: Mapped[Optional["Team"]] = relationship("Team", back_populates="members")

    vacations: Mapped[List["Vacation"]] = relationship(
        "Vacation",
        back_populates="user",
        foreign_keys="Vacation.user_id",
        cascade="all, delete-orphan",
    )

    approved_vacations: Mapped[List["Vacation"]] = relationship(
        "Vacation",
        back_populates="approver",
        foreign_keys="Vacation.approved_by",
    )

    @property
    def has_team(self) -> bool:
        """Check if user belongs to a team."""
        return self.team_id is not None

    def __repr__(self) -> str:
        role = "manager" if self.is_manager else "member"
        return f"<User {self.email} ({role})>"
