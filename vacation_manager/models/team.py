"""
Team model.
Maps to the teams table in PostgreSQL.
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import CheckConstraint, DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vacation_manager.database import Base
from vacation_manager.models.base import utcnow

if TYPE_CHECKING:
    from vacation_manager.models.user import User


class Team(Base):
    """Team model - a named grouping of users, managed by managers."""

    __tablename__ = "teams"
    __table_args__ = (CheckConstraint("length(name) > 0", name="teams_name_not_empty"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow, nullable=False
    )

    # Back-reference only; members are not owned by the team
    members: Mapped[List["User"]] = relationship("User", back_populates="team")

    def __repr__(self) -> str:
        return f"<Team {self.name}>"
