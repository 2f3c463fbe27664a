# app/api/endpoints/admin.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from core.config import settings
from core.constants import CAMPAIGNS_REPORT_FILENAME, FUND_USAGE_REPORT_FILENAME
from core.dependencies import get_statistics, get_storage
from core.permissions import require_roles
from models.user import UserRole
from schemas.campaign import CampaignCreate, CampaignRead, CampaignUpdate
from schemas.common import MessageResponse
from schemas.donation import DonationWithDetails
from schemas.event import (
    EventCreate, EventRead, EventUpdate, EventWithVolunteers,
    VolunteerAssignmentCreate, VolunteerAssignmentRead,
)
from schemas.fund_usage import FundUsageCreate, FundUsageRead, FundUsageWithCampaign
from schemas.stats import AdminStats
from schemas.user import AuthenticatedIdentity, UserRead
from services.export_service import ExportService
from services.statistics_service import StatisticsService
from services.storage import CharityStorage

router = APIRouter()

require_admin = require_roles(UserRole.ADMIN)


def _csv_attachment(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


# --------------------------
# 1️⃣ داشبورد
# --------------------------

@router.get("/stats", response_model=AdminStats)
async def get_admin_stats(
        admin: AuthenticatedIdentity = Depends(require_admin),
        statistics: StatisticsService = Depends(get_statistics),
):
    return await statistics.get_admin_stats()


@router.get("/recent-donations", response_model=List[DonationWithDetails])
async def get_recent_donations(
        admin: AuthenticatedIdentity = Depends(require_admin),
        statistics: StatisticsService = Depends(get_statistics),
):
    """Latest donations with donor and campaign names."""
    return await statistics.get_recent_donations(settings.RECENT_DONATIONS_LIMIT)


# --------------------------
# 2️⃣ کاربران
# --------------------------

@router.get("/users", response_model=List[UserRead])
async def list_users(
        admin: AuthenticatedIdentity = Depends(require_admin),
        storage: CharityStorage = Depends(get_storage),
):
    return await storage.get_all_users()


@router.delete("/users/{user_id}", response_model=MessageResponse)
async def delete_user(
        user_id: int,
        admin: AuthenticatedIdentity = Depends(require_admin),
        storage: CharityStorage = Depends(get_storage),
):
    if user_id == admin.id:
        raise HTTPException(status_code=400, detail="You cannot delete your own account")
    await storage.delete_user(user_id)
    return {"message": "User deleted successfully"}


@router.get("/volunteers", response_model=List[UserRead])
async def list_volunteers(
        admin: AuthenticatedIdentity = Depends(require_admin),
        storage: CharityStorage = Depends(get_storage),
):
    return await storage.get_volunteers()


# --------------------------
# 3️⃣ کمپین‌ها
# --------------------------

@router.post("/campaigns", response_model=CampaignRead)
async def create_campaign(
        campaign_data: CampaignCreate,
        admin: AuthenticatedIdentity = Depends(require_admin),
        storage: CharityStorage = Depends(get_storage),
):
    return await storage.create_campaign(**campaign_data.model_dump())


@router.patch("/campaigns/{campaign_id}", response_model=CampaignRead)
async def update_campaign(
        campaign_id: int,
        update_data: CampaignUpdate,
        admin: AuthenticatedIdentity = Depends(require_admin),
        storage: CharityStorage = Depends(get_storage),
):
    changes = update_data.model_dump(exclude_unset=True, exclude_none=True)
    return await storage.update_campaign(campaign_id, changes)


@router.delete("/campaigns/{campaign_id}", response_model=MessageResponse)
async def delete_campaign(
        campaign_id: int,
        admin: AuthenticatedIdentity = Depends(require_admin),
        storage: CharityStorage = Depends(get_storage),
):
    await storage.delete_campaign(campaign_id)
    return {"message": "Campaign deleted successfully"}


@router.get("/campaigns/{campaign_id}/donations", response_model=List[DonationWithDetails])
async def get_campaign_donations(
        campaign_id: int,
        admin: AuthenticatedIdentity = Depends(require_admin),
        storage: CharityStorage = Depends(get_storage),
        statistics: StatisticsService = Depends(get_statistics),
):
    if not await storage.get_campaign(campaign_id):
        raise HTTPException(status_code=404, detail="Campaign not found")
    return await statistics.get_donations_by_campaign(campaign_id)


# --------------------------
# 4️⃣ رویدادها و داوطلبان
# --------------------------

@router.get("/events", response_model=List[EventWithVolunteers])
async def list_events(
        admin: AuthenticatedIdentity = Depends(require_admin),
        statistics: StatisticsService = Depends(get_statistics),
):
    return await statistics.get_events_with_volunteers()


@router.post("/events", response_model=EventRead)
async def create_event(
        event_data: EventCreate,
        admin: AuthenticatedIdentity = Depends(require_admin),
        storage: CharityStorage = Depends(get_storage),
):
    return await storage.create_event(**event_data.model_dump())


@router.patch("/events/{event_id}", response_model=EventRead)
async def update_event(
        event_id: int,
        update_data: EventUpdate,
        admin: AuthenticatedIdentity = Depends(require_admin),
        storage: CharityStorage = Depends(get_storage),
):
    changes = update_data.model_dump(exclude_unset=True, exclude_none=True)
    return await storage.update_event(event_id, changes)


@router.delete("/events/{event_id}", response_model=MessageResponse)
async def delete_event(
        event_id: int,
        admin: AuthenticatedIdentity = Depends(require_admin),
        storage: CharityStorage = Depends(get_storage),
):
    await storage.delete_event(event_id)
    return {"message": "Event deleted successfully"}


@router.post("/volunteer-assignments", response_model=VolunteerAssignmentRead)
async def assign_volunteer(
        assignment_data: VolunteerAssignmentCreate,
        admin: AuthenticatedIdentity = Depends(require_admin),
        storage: CharityStorage = Depends(get_storage),
):
    return await storage.create_volunteer_assignment(
        volunteer_id=assignment_data.volunteer_id,
        event_id=assignment_data.event_id,
    )


@router.delete("/volunteer-assignments/{assignment_id}", response_model=MessageResponse)
async def unassign_volunteer(
        assignment_id: int,
        admin: AuthenticatedIdentity = Depends(require_admin),
        storage: CharityStorage = Depends(get_storage),
):
    await storage.delete_volunteer_assignment(assignment_id)
    return {"message": "Assignment deleted successfully"}


# --------------------------
# 5️⃣ هزینه‌کرد و گزارش‌ها
# --------------------------

@router.get("/fund-usage", response_model=List[FundUsageWithCampaign])
async def list_fund_usage(
        admin: AuthenticatedIdentity = Depends(require_admin),
        statistics: StatisticsService = Depends(get_statistics),
):
    return await statistics.get_fund_usage()


@router.post("/fund-usage", response_model=FundUsageRead)
async def record_fund_usage(
        usage_data: FundUsageCreate,
        admin: AuthenticatedIdentity = Depends(require_admin),
        storage: CharityStorage = Depends(get_storage),
):
    return await storage.create_fund_usage(**usage_data.model_dump())


@router.get("/reports/campaigns/csv")
async def export_campaigns_csv(
        admin: AuthenticatedIdentity = Depends(require_admin),
        statistics: StatisticsService = Depends(get_statistics),
):
    campaigns = await statistics.get_campaigns_with_stats()
    return _csv_attachment(ExportService.campaigns_csv(campaigns), CAMPAIGNS_REPORT_FILENAME)


@router.get("/reports/fund-usage/csv")
async def export_fund_usage_csv(
        admin: AuthenticatedIdentity = Depends(require_admin),
        statistics: StatisticsService = Depends(get_statistics),
):
    fund_usage = await statistics.get_fund_usage()
    return _csv_attachment(ExportService.fund_usage_csv(fund_usage), FUND_USAGE_REPORT_FILENAME)
