# app/api/endpoints/campaign.py
from typing import List

from fastapi import APIRouter, Depends

from core.dependencies import get_statistics
from core.permissions import get_current_user
from schemas.campaign import CampaignWithStats
from schemas.user import AuthenticatedIdentity
from services.statistics_service import StatisticsService

router = APIRouter()


@router.get("", response_model=List[CampaignWithStats])
async def list_campaigns(
        current_user: AuthenticatedIdentity = Depends(get_current_user),
        statistics: StatisticsService = Depends(get_statistics),
):
    """Every campaign with raised total, donor count and progress."""
    return await statistics.get_campaigns_with_stats()
