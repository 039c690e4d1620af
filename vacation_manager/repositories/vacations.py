"""
Vacation data access.

Also serves as the vacation lookup capability for VacationOverlapRule.
"""

import uuid
from collections.abc import Sequence
from datetime import date
from typing import Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from vacation_manager.database import get_db
from vacation_manager.models.user import User
from vacation_manager.models.vacation import Vacation


class VacationRepository:
    """Async queries and writes for vacations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _select(self):
        return select(Vacation).options(selectinload(Vacation.user))

    async def get_by_id(self, vacation_id: uuid.UUID) -> Optional[Vacation]:
        result = await self.db.execute(self._select().where(Vacation.id == vacation_id))
        return result.scalar_one_or_none()

    async def get_by_user_id(self, user_id: uuid.UUID) -> Sequence[Vacation]:
        result = await self.db.execute(
            self._select()
            .where(Vacation.user_id == user_id)
            .order_by(Vacation.start_date.desc())
        )
        return result.scalars().all()

    async def get_by_team(self, team_id: uuid.UUID) -> Sequence[Vacation]:
        result = await self.db.execute(
            self._select()
            .join(User, Vacation.user_id == User.id)
            .where(User.team_id == team_id)
            .order_by(Vacation.start_date)
        )
        return result.scalars().all()

    async def get_by_date_range(self, start_date: date, end_date: date) -> Sequence[Vacation]:
        """Vacations touching the inclusive range [start_date, end_date]."""
        result = await self.db.execute(
            self._select()
            .where(Vacation.start_date <= end_date)
            .where(Vacation.end_date >= start_date)
            .order_by(Vacation.start_date)
        )
        return result.scalars().all()

    async def create(self, vacation: Vacation) -> Vacation:
        self.db.add(vacation)
        await self.db.flush()
        return vacation

    async def update(self, vacation: Vacation) -> Vacation:
        await self.db.flush()
        return vacation

    async def delete(self, vacation: Vacation) -> None:
        await self.db.delete(vacation)
        await self.db.flush()


async def get_vacation_repository(db: AsyncSession = Depends(get_db)) -> VacationRepository:
    """FastAPI dependency providing a request-scoped VacationRepository."""
    return VacationRepository(db)
