"""
Vacation model for employee time-off requests.
Maps to the vacations table in PostgreSQL.
"""

import enum
import uuid
from datetime import date, datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, DateTime, Enum, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vacation_manager.database import Base
from vacation_manager.models.base import utcnow

if TYPE_CHECKING:
    from vacation_manager.models.user import User


class VacationType(str, enum.Enum):
    VACATION = "vacation"
    SICK_LEAVE = "sick_leave"
    PERSONAL_DAY = "personal_day"
    COMPENSATORY_TIME = "compensatory_time"
    OTHER = "other"


class VacationStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


def _enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    return [member.value for member in enum_cls]


class Vacation(Base):
    """Vacation model - a time-off request over an inclusive date range."""

    __tablename__ = "vacations"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    type: Mapped[VacationType] = mapped_column(
        Enum(VacationType, name="vacation_type", native_enum=False, length=32,
             values_callable=_enum_values),
        default=VacationType.VACATION,
        nullable=False,
    )
    status: Mapped[VacationStatus] = mapped_column(
        Enum(VacationStatus, name="vacation_status", native_enum=False, length=32,
             values_callable=_enum_values),
        default=VacationStatus.PENDING,
        nullable=False,
    )
    approved_by: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow, nullable=False
    )

    # Relationships
    user: Mapped["User"] = relationship(
        "User", back_populates="vacations", foreign_keys=[user_id], lazy="selectin"
    )
    approver: Mapped[Optional["User"]] = relationship(
        "User", back_populates="approved_vacations", foreign_keys=[approved_by]
    )

    @property
    def user_name(self) -> str:
        """Get the owner's display name."""
        return self.user.display_name if self.user else ""

    @property
    def duration_days(self) -> int:
        """Calculate duration in days (inclusive)."""
        return (self.end_date - self.start_date).days + 1

    def __repr__(self) -> str:
        return f"<Vacation {self.user_id} ({self.start_date} to {self.end_date}, {self.status})>"
