"""
Pydantic schemas for Users.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from vacation_manager.schemas.base import BaseSchema, DateTimeUTC


class UserResponse(BaseSchema):
    """Response model for users."""
    id: uuid.UUID
    email: str
    display_name: str
    department: Optional[str] = None
    team_id: Optional[uuid.UUID] = None
    is_manager: bool = False
    created_at: DateTimeUTC


class UserUpdate(BaseModel):
    """Request model for updating one's own profile. Team changes have their own endpoints."""
    display_name: Optional[str] = Field(None, min_length=2, max_length=256)
    department: Optional[str] = Field(None, max_length=256)


class UserRegistration(BaseModel):
    """Claims needed to auto-register a caller on first sign-in."""
    entra_id: str = Field(..., min_length=1, max_length=256)
    email: EmailStr = Field(..., max_length=256)
    display_name: str = Field(..., min_length=2, max_length=256)
