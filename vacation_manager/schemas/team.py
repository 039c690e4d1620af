"""
Pydantic schemas for Teams.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from vacation_manager.schemas.base import BaseSchema, DateTimeUTC


class TeamResponse(BaseSchema):
    """Response model for teams."""
    id: uuid.UUID
    name: str
    description: Optional[str] = None
    created_at: DateTimeUTC


class TeamCreate(BaseModel):
    """Request model for creating a team."""
    name: str = Field(..., min_length=2, max_length=256)
    description: Optional[str] = Field(None, max_length=1000)


class TeamUpdate(BaseModel):
    """Request model for updating a team. Empty name means unchanged."""
    name: Optional[str] = Field(None, max_length=256)
    description: Optional[str] = Field(None, max_length=1000)

    @field_validator("name")
    @classmethod
    def name_min_length(cls, name: Optional[str]) -> Optional[str]:
        if name and len(name) < 2:
            raise ValueError("Team name must be at least 2 characters")
        return name
