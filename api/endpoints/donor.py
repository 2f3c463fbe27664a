# app/api/endpoints/donor.py
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from core.dependencies import get_statistics, get_storage
from core.permissions import require_roles
from models.user import UserRole
from schemas.donation import DonationCreate, DonationRead, DonationWithDetails
from schemas.stats import DonorStats
from schemas.user import AuthenticatedIdentity
from services.donation_service import DonationService
from services.statistics_service import StatisticsService
from services.storage import CharityStorage

router = APIRouter()

require_donor = require_roles(UserRole.DONOR)


@router.get("/stats", response_model=DonorStats)
async def get_donor_stats(
        current_user: AuthenticatedIdentity = Depends(require_donor),
        statistics: StatisticsService = Depends(get_statistics),
):
    return await statistics.get_donor_stats(current_user.id)


@router.get("/donations", response_model=List[DonationWithDetails])
async def get_my_donations(
        current_user: AuthenticatedIdentity = Depends(require_donor),
        statistics: StatisticsService = Depends(get_statistics),
):
    """Donation history of the caller, newest first."""
    return await statistics.get_donations_by_donor(current_user.id)


@router.post("/donations", response_model=DonationRead)
async def create_donation(
        donation_data: DonationCreate,
        current_user: AuthenticatedIdentity = Depends(require_donor),
        storage: CharityStorage = Depends(get_storage),
):
    service = DonationService(storage)
    return await service.create_donation(donation_data, current_user)


@router.get("/receipt/{donation_id}/pdf", response_class=HTMLResponse)
async def get_receipt(
        donation_id: int,
        current_user: AuthenticatedIdentity = Depends(require_donor),
        storage: CharityStorage = Depends(get_storage),
):
    """Receipt for one of the caller's donations, as an HTML document."""
    service = DonationService(storage)
    return HTMLResponse(await service.render_receipt(donation_id, current_user))
