"""
User data access.
"""

import uuid
from collections.abc import Sequence
from typing import Optional

from fastapi import Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from vacation_manager.database import get_db
from vacation_manager.models.user import User


class UserRepository:
    """Async queries and writes for users."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_entra_id(self, entra_id: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.entra_id == entra_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_all(self) -> Sequence[User]:
        result = await self.db.execute(select(User).order_by(User.display_name))
        return result.scalars().all()

    async def get_by_team(self, team_id: uuid.UUID) -> Sequence[User]:
        result = await self.db.execute(
            select(User).where(User.team_id == team_id).order_by(User.display_name)
        )
        return result.scalars().all()

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(User))
        return result.scalar_one()

    async def create(self, user: User) -> User:
        self.db.add(user)
        await self.db.flush()
        return user

    async def update(self, user: User) -> User:
        await self.db.flush()
        return user


async def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    """FastAPI dependency providing a request-scoped UserRepository."""
    return UserRepository(db)
