"""
Vacations API router.
Handles vacation requests, approvals and team calendars.
"""

import logging
import uuid
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from vacation_manager.core.specifications import (
    DateRangeSpecification,
    PendingVacationsSpecification,
)
from vacation_manager.core.validation import VacationOverlapRule, VacationValidationService
from vacation_manager.exceptions import NotFoundError, ValidationError, raise_for_outcome
from vacation_manager.middleware.auth import get_current_user
from vacation_manager.models.user import User
from vacation_manager.models.vacation import Vacation, VacationStatus
from vacation_manager.repositories.vacations import VacationRepository, get_vacation_repository
from vacation_manager.schemas.vacation import (
    VacationApprove,
    VacationCreate,
    VacationResponse,
    VacationUpdate,
)
from vacation_manager.services.authorization import AuthorizationHelper, get_authorization_helper
from vacation_manager.services.validation import get_vacation_validation_service

logger = logging.getLogger(__name__)

router = APIRouter()


def build_vacation_response(vacation: Vacation) -> dict:
    """Build vacation response dict."""
    return {
        "id": vacation.id,
        "user_id": vacation.user_id,
        "user_name": vacation.user_name,
        "start_date": vacation.start_date,
        "end_date": vacation.end_date,
        "type": vacation.type,
        "status": vacation.status,
        "approved_by": vacation.approved_by,
        "notes": vacation.notes,
        "created_at": vacation.created_at,
        "updated_at": vacation.updated_at,
    }


def date_range_filter(start_date: Optional[date], end_date: Optional[date]) -> Optional[DateRangeSpecification]:
    """Date filter from optional query bounds; both must be given to filter."""
    if start_date is None or end_date is None:
        return None
    if start_date > end_date:
        raise ValidationError("startDate must be before or equal to endDate")
    return DateRangeSpecification(start_date, end_date)


async def get_vacation_or_404(vacations: VacationRepository, vacation_id: uuid.UUID) -> Vacation:
    vacation = await vacations.get_by_id(vacation_id)
    if vacation is None:
        raise NotFoundError("Vacation", vacation_id)
    return vacation


@router.get("/vacations", response_model=List[VacationResponse])
async def get_my_vacations(
    user: User = Depends(get_current_user),
    vacations: VacationRepository = Depends(get_vacation_repository),
):
    """Get the caller's own vacations, newest first."""
    return [build_vacation_response(v) for v in await vacations.get_by_user_id(user.id)]


@router.get("/vacations/team/pending", response_model=List[VacationResponse])
async def get_team_pending_vacations(
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    vacations: VacationRepository = Depends(get_vacation_repository),
):
    """
    Get pending vacations of the caller's team.

    Requires a manager who belongs to a team.
    """
    user, outcome = await auth.authorize_team_pending()
    raise_for_outcome(outcome)

    pending = PendingVacationsSpecification()
    team_vacations = await vacations.get_by_team(user.team_id)
    return [build_vacation_response(v) for v in team_vacations if pending(v)]


@router.get("/vacations/team", response_model=List[VacationResponse])
async def get_team_vacations(
    startDate: Optional[date] = Query(None),
    endDate: Optional[date] = Query(None),
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    vacations: VacationRepository = Depends(get_vacation_repository),
):
    """
    Get vacations of the caller's team (team calendar).

    If both startDate and endDate are given, only vacations touching that
    inclusive range are returned.
    """
    in_range = date_range_filter(startDate, endDate)

    user, outcome = await auth.authorize_team_operation()
    raise_for_outcome(outcome)

    team_vacations = await vacations.get_by_team(user.team_id)
    if in_range is not None:
        team_vacations = [v for v in team_vacations if in_range(v)]
    return [build_vacation_response(v) for v in team_vacations]


@router.get("/vacations/{vacation_id}", response_model=VacationResponse)
async def get_vacation(
    vacation_id: uuid.UUID,
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    vacations: VacationRepository = Depends(get_vacation_repository),
):
    """
    Get a specific vacation.

    Visible to its owner and to managers of the owner's team.
    """
    vacation = await get_vacation_or_404(vacations, vacation_id)

    owner_team_id = vacation.user.team_id if vacation.user else None
    _, outcome = await auth.authorize_vacation_ownership(vacation, owner_team_id)
    raise_for_outcome(outcome)

    return build_vacation_response(vacation)


@router.post("/vacations", response_model=VacationResponse, status_code=201)
async def create_vacation(
    data: VacationCreate,
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    vacations: VacationRepository = Depends(get_vacation_repository),
    validation: VacationValidationService = Depends(get_vacation_validation_service),
):
    """
    Request a vacation for the caller.

    Requires team membership. Fails with 409 if the range overlaps one of
    the caller's approved vacations.
    """
    user, outcome = await auth.authorize_create_vacation()
    raise_for_outcome(outcome)

    vacation = Vacation(
        id=uuid.uuid4(),
        user_id=user.id,
        start_date=data.start_date,
        end_date=data.end_date,
        type=data.type,
        notes=data.notes,
        status=VacationStatus.PENDING,
    )

    raise_for_outcome(await validation.validate(vacation, user))

    created = await vacations.create(vacation)
    # Linked only once persisted; the overlap lookup autoflushes
    created.user = user
    logger.info("Vacation created: %s for user %s", created.id, user.id)

    return build_vacation_response(created)


@router.put("/vacations/{vacation_id}", response_model=VacationResponse)
async def update_vacation(
    vacation_id: uuid.UUID,
    data: VacationUpdate,
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    vacations: VacationRepository = Depends(get_vacation_repository),
    validation: VacationValidationService = Depends(get_vacation_validation_service),
):
    """
    Update one of the caller's pending vacations.

    The new range is re-validated; the vacation's own stored record does
    not count as an overlap.
    """
    vacation = await get_vacation_or_404(vacations, vacation_id)

    user, outcome = await auth.authorize_vacation_ownership(vacation)
    raise_for_outcome(outcome)

    if vacation.status != VacationStatus.PENDING:
        raise ValidationError("Only pending vacations can be edited")

    candidate = Vacation(
        id=vacation.id,
        user_id=vacation.user_id,
        start_date=data.start_date,
        end_date=data.end_date,
        type=data.type or vacation.type,
        status=vacation.status,
    )
    raise_for_outcome(await validation.validate(candidate, user))

    vacation.start_date = data.start_date
    vacation.end_date = data.end_date
    if data.type is not None:
        vacation.type = data.type
    vacation.notes = data.notes

    updated = await vacations.update(vacation)
    return build_vacation_response(updated)


@router.delete("/vacations/{vacation_id}", status_code=204)
async def delete_vacation(
    vacation_id: uuid.UUID,
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    vacations: VacationRepository = Depends(get_vacation_repository),
):
    """Delete one of the caller's vacations."""
    vacation = await get_vacation_or_404(vacations, vacation_id)

    _, outcome = await auth.authorize_vacation_ownership(vacation)
    raise_for_outcome(outcome)

    await vacations.delete(vacation)
    logger.info("Vacation deleted: %s", vacation_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/vacations/{vacation_id}/approve", response_model=VacationResponse)
async def approve_vacation(
    vacation_id: uuid.UUID,
    data: VacationApprove,
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    vacations: VacationRepository = Depends(get_vacation_repository),
):
    """
    Approve or reject a pending vacation.

    Requires a manager of the owner's team. Approving re-checks that the
    owner has no overlapping approved vacation.
    """
    vacation = await get_vacation_or_404(vacations, vacation_id)
    owner = vacation.user

    manager, outcome = await auth.authorize_approval(owner.team_id if owner else None)
    raise_for_outcome(outcome)

    if vacation.status != VacationStatus.PENDING:
        raise ValidationError("Only pending vacations can be approved or rejected")

    if data.approved:
        raise_for_outcome(await VacationOverlapRule(vacations).validate(vacation, owner))
        vacation.status = VacationStatus.APPROVED
    else:
        vacation.status = VacationStatus.REJECTED
        reason = f"Rejected: {data.reject_reason.strip()}"
        vacation.notes = f"{vacation.notes}\n{reason}" if vacation.notes else reason

    vacation.approved_by = manager.id

    updated = await vacations.update(vacation)
    logger.info("Vacation %s %s by %s", vacation_id, vacation.status.value, manager.id)

    return build_vacation_response(updated)


@router.post("/vacations/{vacation_id}/cancel", response_model=VacationResponse)
async def cancel_vacation(
    vacation_id: uuid.UUID,
    auth: AuthorizationHelper = Depends(get_authorization_helper),
    vacations: VacationRepository = Depends(get_vacation_repository),
):
    """
    Cancel an approved vacation.

    Allowed for the owner and for managers of the owner's team.
    """
    vacation = await get_vacation_or_404(vacations, vacation_id)

    owner_team_id = vacation.user.team_id if vacation.user else None
    user, outcome = await auth.authorize_vacation_ownership(vacation, owner_team_id)
    raise_for_outcome(outcome)

    if vacation.status != VacationStatus.APPROVED:
        raise ValidationError("Only approved vacations can be cancelled")

    vacation.status = VacationStatus.CANCELLED

    updated = await vacations.update(vacation)
    logger.info("Vacation %s cancelled by %s", vacation_id, user.id)

    return build_vacation_response(updated)
