# app/services/statistics_service.py
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy import select, func, distinct
from collections import defaultdict
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional

from core.constants import HOURS_PER_EVENT
from models.campaign import Campaign
from models.donation import Donation
from models.event import Event
from models.fund_usage import FundUsage
from models.user import User, UserRole
from models.volunteer_assignment import VolunteerAssignment
from schemas.campaign import CampaignWithStats
from schemas.donation import DonationWithDetails
from schemas.event import EventWithVolunteers
from schemas.fund_usage import FundUsageWithCampaign
from schemas.stats import AdminStats, DonorStats, VolunteerStats
from schemas.user import UserSummary

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    """SUM() comes back as int, float, str or Decimal depending on the driver."""
    if value is None:
        return Decimal("0.00")
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def progress_percentage(total, goal) -> int:
    """Raised as a whole percentage of goal, half rounded up, never above 100."""
    total = to_money(total)
    goal = to_money(goal)
    percent = (total / goal * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return min(int(percent), 100)


class StatisticsService:
    """
    Read-only views derived from the stored entities.

    Nothing computed here is persisted; every figure is recalculated from the
    donation, assignment and fund usage rows on each call.
    """

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    # ---------- 1️⃣ کمپین‌ها با آمار ----------
    async def get_campaigns_with_stats(self) -> List[CampaignWithStats]:
        total = func.coalesce(func.sum(Donation.amount), 0).label("total_donations")
        donors = func.count(distinct(Donation.donor_id)).label("donor_count")

        query = (
            select(Campaign, total, donors)
            .outerjoin(Donation, Donation.campaign_id == Campaign.id)
            .group_by(Campaign.id)
            .order_by(Campaign.created_at.desc(), Campaign.id.desc())
        )

        async with self.session_factory() as db:
            rows = (await db.execute(query)).all()

        return [
            CampaignWithStats(
                id=campaign.id,
                name=campaign.name,
                description=campaign.description,
                goal_amount=campaign.goal_amount,
                status=campaign.status,
                created_at=campaign.created_at,
                total_donations=to_money(total_donations),
                donor_count=donor_count or 0,
                progress_percentage=progress_percentage(total_donations, campaign.goal_amount),
            )
            for campaign, total_donations, donor_count in rows
        ]

    # ---------- 2️⃣ داشبورد ادمین ----------
    async def get_admin_stats(self) -> AdminStats:
        async with self.session_factory() as db:
            total_campaigns = await db.scalar(select(func.count(Campaign.id)))
            total_donations = await db.scalar(select(func.count(Donation.id)))
            active_volunteers = await db.scalar(
                select(func.count(User.id)).where(User.role == UserRole.VOLUNTEER)
            )
            total_raised = await db.scalar(select(func.coalesce(func.sum(Donation.amount), 0)))

        return AdminStats(
            total_campaigns=total_campaigns or 0,
            total_donations=total_donations or 0,
            active_volunteers=active_volunteers or 0,
            total_raised=to_money(total_raised),
        )

    # ---------- 3️⃣ داشبورد خیر ----------
    async def get_donor_stats(self, donor_id: int) -> DonorStats:
        async with self.session_factory() as db:
            total_donated = await db.scalar(
                select(func.coalesce(func.sum(Donation.amount), 0))
                .where(Donation.donor_id == donor_id)
            )
            campaigns_supported = await db.scalar(
                select(func.count(distinct(Donation.campaign_id)))
                .where(Donation.donor_id == donor_id)
            )
            last_donation = await db.scalar(
                select(Donation.created_at)
                .where(Donation.donor_id == donor_id)
                .order_by(Donation.created_at.desc(), Donation.id.desc())
                .limit(1)
            )

        return DonorStats(
            total_donated=to_money(total_donated),
            campaigns_supported=campaigns_supported or 0,
            last_donation=last_donation,
        )

    # ---------- 4️⃣ داشبورد داوطلب ----------
    async def get_volunteer_stats(self, volunteer_id: int, now: Optional[datetime] = None) -> VolunteerStats:
        if now is None:
            now = datetime.now(timezone.utc)

        async with self.session_factory() as db:
            upcoming_events = await db.scalar(
                select(func.count(VolunteerAssignment.id))
                .join(Event, VolunteerAssignment.event_id == Event.id)
                .where(
                    VolunteerAssignment.volunteer_id == volunteer_id,
                    Event.date > now,
                )
            )
            total_events = await db.scalar(
                select(func.count(VolunteerAssignment.id))
                .where(VolunteerAssignment.volunteer_id == volunteer_id)
            )

        total_events = total_events or 0
        return VolunteerStats(
            upcoming_events=upcoming_events or 0,
            total_events=total_events,
            hours_volunteered=total_events * HOURS_PER_EVENT,
        )

    # ---------- 5️⃣ رویدادها با داوطلبان ----------
    async def get_events_with_volunteers(self, volunteer_id: Optional[int] = None) -> List[EventWithVolunteers]:
        """All events, or only those the given volunteer is assigned to."""
        query = select(Event).order_by(Event.date.desc(), Event.id.desc())
        if volunteer_id is not None:
            query = query.where(
                Event.id.in_(
                    select(VolunteerAssignment.event_id)
                    .where(VolunteerAssignment.volunteer_id == volunteer_id)
                )
            )

        async with self.session_factory() as db:
            events = (await db.execute(query)).scalars().all()

            rosters: Dict[int, Dict[int, UserSummary]] = defaultdict(dict)
            if events:
                roster_rows = await db.execute(
                    select(VolunteerAssignment.event_id, User.id, User.name, User.email)
                    .join(User, VolunteerAssignment.volunteer_id == User.id)
                    .where(VolunteerAssignment.event_id.in_([e.id for e in events]))
                    .order_by(VolunteerAssignment.assigned_at, VolunteerAssignment.id)
                )
                for event_id, user_id, name, email in roster_rows:
                    rosters[event_id].setdefault(user_id, UserSummary(id=user_id, name=name, email=email))

        return [
            EventWithVolunteers(
                id=e.id,
                title=e.title,
                description=e.description,
                date=e.date,
                location=e.location,
                created_at=e.created_at,
                volunteer_count=len(rosters[e.id]),
                volunteers=list(rosters[e.id].values()),
            )
            for e in events
        ]

    # ---------- 6️⃣ کمک‌ها با جزئیات ----------
    async def get_recent_donations(self, limit: int) -> List[DonationWithDetails]:
        return await self._donations_with_details(limit=limit)

    async def get_donations_by_donor(self, donor_id: int) -> List[DonationWithDetails]:
        return await self._donations_with_details(Donation.donor_id == donor_id)

    async def get_donations_by_campaign(self, campaign_id: int) -> List[DonationWithDetails]:
        return await self._donations_with_details(Donation.campaign_id == campaign_id)

    # ---------- 7️⃣ هزینه‌کرد ----------
    async def get_fund_usage(self) -> List[FundUsageWithCampaign]:
        query = (
            select(FundUsage, Campaign.name)
            .join(Campaign, FundUsage.campaign_id == Campaign.id)
            .order_by(FundUsage.spent_at.desc(), FundUsage.id.desc())
        )

        async with self.session_factory() as db:
            rows = (await db.execute(query)).all()

        return [
            FundUsageWithCampaign(
                id=usage.id,
                campaign_id=usage.campaign_id,
                description=usage.description,
                amount_spent=usage.amount_spent,
                spent_at=usage.spent_at,
                campaign_name=campaign_name,
            )
            for usage, campaign_name in rows
        ]

    # ---------- HELPERS ----------
    async def _donations_with_details(self, *criteria, limit: Optional[int] = None) -> List[DonationWithDetails]:
        query = (
            select(Donation, User.id, User.name, User.email, Campaign.id, Campaign.name)
            .join(User, Donation.donor_id == User.id)
            .join(Campaign, Donation.campaign_id == Campaign.id)
            .where(*criteria)
            .order_by(Donation.created_at.desc(), Donation.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)

        async with self.session_factory() as db:
            rows = (await db.execute(query)).all()

        return [
            DonationWithDetails(
                id=d.id,
                donor_id=d.donor_id,
                campaign_id=d.campaign_id,
                amount=d.amount,
                receipt_id=d.receipt_id,
                created_at=d.created_at,
                donor={"id": donor_id, "name": donor_name, "email": donor_email},
                campaign={"id": campaign_id, "name": campaign_name},
            )
            for d, donor_id, donor_name, donor_email, campaign_id, campaign_name in rows
        ]
