# app/api/endpoints/volunteer.py
from typing import List

from fastapi import APIRouter, Depends

from core.dependencies import get_statistics
from core.permissions import require_roles
from models.user import UserRole
from schemas.event import EventWithVolunteers
from schemas.stats import VolunteerStats
from schemas.user import AuthenticatedIdentity
from services.statistics_service import StatisticsService

router = APIRouter()

require_volunteer = require_roles(UserRole.VOLUNTEER)


@router.get("/stats", response_model=VolunteerStats)
async def get_volunteer_stats(
        current_user: AuthenticatedIdentity = Depends(require_volunteer),
        statistics: StatisticsService = Depends(get_statistics),
):
    return await statistics.get_volunteer_stats(current_user.id)


@router.get("/my-events", response_model=List[EventWithVolunteers])
async def get_my_events(
        current_user: AuthenticatedIdentity = Depends(require_volunteer),
        statistics: StatisticsService = Depends(get_statistics),
):
    return await statistics.get_events_with_volunteers(volunteer_id=current_user.id)
