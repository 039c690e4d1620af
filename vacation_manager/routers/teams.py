"""
Teams API router.
Team CRUD is reserved for managers; members can read their team and its calendar.
"""

import logging
import uuid
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from vacation_manager.core.specifications import TeamSpecification
from vacation_manager.exceptions import NotFoundError, raise_for_outcome
from vacation_manager.models.team import Team
from vacation_manager.repositories.teams import TeamRepository, get_team_repository
from vacation_manager.repositories.users import UserRepository, get_user_repository
from vacation_manager.repositories.vacations import VacationRepository, get_vacation_repository
from vacation_manager.routers.vacations import build_vacation_response, date_range_filter
from vacation_manager.schemas.team import TeamCreate, TeamResponse, TeamUpdate
from vacation_manager.schemas.vacation import VacationResponse
from vacation_manager.services.authorization import AuthorizationHelper, get_authorization_helper

logger = logging.getLogger(__name__)

router = APIRouter()


async def get_team_or_404(teams: TeamRepository, team_id: uuid.UUID) -> Team:
    team = await teams.get_by_id(team_id)
    if team is None:
        raise NotFoundError("Team", team_id)
    return team


@router.get("/teams", response_model=List[TeamResponse])
async def get_teams(
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    teams: TeamRepository = Depends(get_team_repository),
):
    """
    List teams.

    Managers see every team; everyone else sees only their own.
    """
    user, outcome = await auth.ensure_authenticated()
    raise_for_outcome(outcome)

    if user.is_manager:
        return await teams.get_all()
    return await teams.get_by_user(user.id)


@router.get("/teams/{team_id}", response_model=TeamResponse)
async def get_team(
    team_id: uuid.UUID,
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    teams: TeamRepository = Depends(get_team_repository),
):
    """Get a team by id."""
    _, outcome = await auth.ensure_authenticated()
    raise_for_outcome(outcome)

    return await get_team_or_404(teams, team_id)


@router.get("/teams/{team_id}/vacations", response_model=List[VacationResponse])
async def get_team_vacations(
    team_id: uuid.UUID,
    startDate: Optional[date] = Query(None),
    endDate: Optional[date] = Query(None),
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    teams: TeamRepository = Depends(get_team_repository),
    users: UserRepository = Depends(get_user_repository),
    vacations: VacationRepository = Depends(get_vacation_repository),
):
    """
    Get the vacation calendar of a team.

    Open to members of the team and to managers. With both startDate and
    endDate, only vacations touching that inclusive range are returned.
    """
    in_range = date_range_filter(startDate, endDate)

    _, outcome = await auth.ensure_team_member_or_manager(team_id)
    raise_for_outcome(outcome)

    await get_team_or_404(teams, team_id)

    if in_range is None:
        team_vacations = await vacations.get_by_team(team_id)
    else:
        members = await users.get_by_team(team_id)
        in_team = TeamSpecification(team_id, {m.id: m.team_id for m in members})
        team_vacations = [
            v
            for v in await vacations.get_by_date_range(in_range.start_date, in_range.end_date)
            if in_team(v)
        ]

    return [build_vacation_response(v) for v in team_vacations]


@router.post("/teams", response_model=TeamResponse, status_code=201)
async def create_team(
    data: TeamCreate,
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    teams: TeamRepository = Depends(get_team_repository),
):
    """Create a team (managers only)."""
    user, outcome = await auth.authorize_manager_operation()
    raise_for_outcome(outcome)

    team = Team(id=uuid.uuid4(), name=data.name, description=data.description)
    created = await teams.create(team)
    logger.info("Team created: %s (%s) by %s", created.name, created.id, user.id)

    return created


@router.put("/teams/{team_id}", response_model=TeamResponse)
async def update_team(
    team_id: uuid.UUID,
    data: TeamUpdate,
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    teams: TeamRepository = Depends(get_team_repository),
):
    """
    Update a team (managers only).

    An empty or omitted name keeps the current one.
    """
    _, outcome = await auth.authorize_manager_operation()
    raise_for_outcome(outcome)

    team = await get_team_or_404(teams, team_id)

    if data.name:
        team.name = data.name
    if data.description is not None:
        team.description = data.description

    return await teams.update(team)


@router.delete("/teams/{team_id}", status_code=204)
async def delete_team(
    team_id: uuid.UUID,
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    teams: TeamRepository = Depends(get_team_repository),
):
    """Delete a team (managers only). Members are kept without a team."""
    user, outcome = await auth.authorize_manager_operation()
    raise_for_outcome(outcome)

    team = await get_team_or_404(teams, team_id)
    await teams.delete(team)
    logger.info("Team deleted: %s by %s", team_id, user.id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
