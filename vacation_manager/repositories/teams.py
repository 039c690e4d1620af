"""
Team data access.
"""

import uuid
from collections.abc import Sequence
from typing import Optional

from fastapi import Depends
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from vacation_manager.database import get_db
from vacation_manager.models.team import Team
from vacation_manager.models.user import User


class TeamRepository:
    """Async queries and writes for teams."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, team_id: uuid.UUID) -> Optional[Team]:
        result = await self.db.execute(select(Team).where(Team.id == team_id))
        return result.scalar_one_or_none()

    async def get_all(self) -> Sequence[Team]:
        result = await self.db.execute(select(Team).order_by(Team.name))
        return result.scalars().all()

    async def get_by_user(self, user_id: uuid.UUID) -> Sequence[Team]:
        """Teams the user belongs to (zero or one)."""
        result = await self.db.execute(
            select(Team).join(User, User.team_id == Team.id).where(User.id == user_id)
        )
        return result.scalars().all()

    async def create(self, team: Team) -> Team:
        self.db.add(team)
        await self.db.flush()
        return team

    async def update(self, team: Team) -> Team:
        await self.db.flush()
        return team

    async def delete(self, team: Team) -> None:
        """Delete a team; its members stay, without a team."""
        await self.db.execute(update(User).where(User.team_id == team.id).values(team_id=None))
        await self.db.delete(team)
        await self.db.flush()


async def get_team_repository(db: AsyncSession = Depends(get_db)) -> TeamRepository:
    """FastAPI dependency providing a request-scoped TeamRepository."""
    return TeamRepository(db)
