"""
Pydantic schemas for Vacations.
"""

import uuid
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from vacation_manager.models.vacation import VacationStatus, VacationType
from vacation_manager.schemas.base import BaseSchema, DateTimeUTC


class VacationResponse(BaseSchema):
    """Response model for vacations."""
    id: uuid.UUID
    user_id: uuid.UUID
    user_name: Optional[str] = None
    start_date: date
    end_date: date
    type: VacationType
    status: VacationStatus
    approved_by: Optional[uuid.UUID] = None
    notes: Optional[str] = None
    created_at: DateTimeUTC
    updated_at: DateTimeUTC


class _DateRange(BaseModel):
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def start_not_after_end(self):
        if self.start_date > self.end_date:
            raise ValueError("Start date must be before or equal to end date")
        return self


class VacationCreate(_DateRange):
    """Request model for creating a vacation (always for the caller)."""
    type: VacationType = VacationType.VACATION
    notes: Optional[str] = Field(None, max_length=1000)


class VacationUpdate(_DateRange):
    """Request model for updating a vacation. Omitted type keeps the current one."""
    type: Optional[VacationType] = None
    notes: Optional[str] = Field(None, max_length=1000)


class VacationApprove(BaseModel):
    """Approval decision. Rejections need a reason."""
    approved: bool
    reject_reason: Optional[str] = Field(None, max_length=500)

    @model_validator(mode="after")
    def reason_required_when_rejecting(self):
        if not self.approved and not (self.reject_reason and self.reject_reason.strip()):
            raise ValueError("Rejection reason is required when rejecting a vacation")
        return self
