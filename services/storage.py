# app/services/storage.py
import logging
from typing import Any, Dict, List, Optional

from fastapi import HTTPException
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import async_sessionmaker

from models.campaign import Campaign
from models.donation import Donation
from models.event import Event
from models.fund_usage import FundUsage
from models.user import User, UserRole
from models.volunteer_assignment import VolunteerAssignment

logger = logging.getLogger(__name__)


class CharityStorage:
    """
    Data access for the six stored entities.

    Built once per process around a session factory and handed to request
    handlers through FastAPI dependencies. Every method runs in its own
    session and commits at most once.
    """

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    # ---------- کاربران ----------
    async def get_user_by_username(self, username: str) -> Optional[User]:
        async with self.session_factory() as db:
            result = await db.execute(select(User).where(User.username == username))
            return result.scalar_one_or_none()

    async def get_user_by_email(self, email: str) -> Optional[User]:
        async with self.session_factory() as db:
            result = await db.execute(select(User).where(User.email == email))
            return result.scalar_one_or_none()

    async def create_user(self, **fields) -> User:
        async with self.session_factory() as db:
            user = User(**fields)
            db.add(user)
            try:
                await db.commit()
            except IntegrityError:
                # lost a race with a concurrent registration
                await db.rollback()
                raise HTTPException(status_code=400, detail="Username or email already exists")
            await db.refresh(user)
            return user

    async def get_all_users(self) -> List[User]:
        async with self.session_factory() as db:
            result = await db.execute(select(User).order_by(User.created_at.desc(), User.id.desc()))
            return list(result.scalars().all())

    async def get_volunteers(self) -> List[User]:
        async with self.session_factory() as db:
            result = await db.execute(
                select(User)
                .where(User.role == UserRole.VOLUNTEER)
                .order_by(User.name)
            )
            return list(result.scalars().all())

    async def delete_user(self, user_id: int) -> None:
        await self._delete(
            delete(User).where(User.id == user_id),
            not_found="User not found",
            restricted="User has donations or event assignments and cannot be deleted",
        )
        logger.info(f"User {user_id} deleted")

    # ---------- کمپین‌ها ----------
    async def get_campaign(self, campaign_id: int) -> Optional[Campaign]:
        async with self.session_factory() as db:
            return await db.get(Campaign, campaign_id)

    async def create_campaign(self, **fields) -> Campaign:
        async with self.session_factory() as db:
            campaign = Campaign(**fields)
            db.add(campaign)
            await db.commit()
            await db.refresh(campaign)
            logger.info(f"Campaign {campaign.id} created")
            return campaign

    async def update_campaign(self, campaign_id: int, changes: Dict[str, Any]) -> Campaign:
        async with self.session_factory() as db:
            campaign = await db.get(Campaign, campaign_id)
            if not campaign:
                raise HTTPException(status_code=404, detail="Campaign not found")

            for key, value in changes.items():
                setattr(campaign, key, value)

            db.add(campaign)
            await db.commit()
            await db.refresh(campaign)
            return campaign

    async def delete_campaign(self, campaign_id: int) -> None:
        await self._delete(
            delete(Campaign).where(Campaign.id == campaign_id),
            not_found="Campaign not found",
            restricted="Campaign has donations or fund usage records and cannot be deleted",
        )
        logger.info(f"Campaign {campaign_id} deleted")

    # ---------- کمک‌ها ----------
    async def get_donation(self, donation_id: int) -> Optional[Donation]:
        async with self.session_factory() as db:
            return await db.get(Donation, donation_id)

    async def create_donation(self, donor_id: int, campaign_id: int, amount) -> Donation:
        """Single INSERT. The campaign reference is checked by the foreign key only."""
        async with self.session_factory() as db:
            donation = Donation(donor_id=donor_id, campaign_id=campaign_id, amount=amount)
            db.add(donation)
            try:
                await db.commit()
            except IntegrityError as e:
                await db.rollback()
                logger.warning(f"Donation rejected by store for campaign {campaign_id}: {e.orig}")
                if not await db.get(Campaign, campaign_id):
                    raise HTTPException(status_code=404, detail="Campaign not found")
                # the campaign exists, so the donor behind the token is gone
                raise HTTPException(
                    status_code=401,
                    detail="Invalid or expired token",
                    headers={"WWW-Authenticate": "Bearer"},
                )
            await db.refresh(donation)
            return donation

    # ---------- رویدادها ----------
    async def create_event(self, **fields) -> Event:
        async with self.session_factory() as db:
            event = Event(**fields)
            db.add(event)
            await db.commit()
            await db.refresh(event)
            logger.info(f"Event {event.id} created")
            return event

    async def update_event(self, event_id: int, changes: Dict[str, Any]) -> Event:
        async with self.session_factory() as db:
            event = await db.get(Event, event_id)
            if not event:
                raise HTTPException(status_code=404, detail="Event not found")

            for key, value in changes.items():
                setattr(event, key, value)

            db.add(event)
            await db.commit()
            await db.refresh(event)
            return event

    async def delete_event(self, event_id: int) -> None:
        # assignments go with the event (ON DELETE CASCADE)
        await self._delete(
            delete(Event).where(Event.id == event_id),
            not_found="Event not found",
        )
        logger.info(f"Event {event_id} deleted")

    # ---------- تخصیص داوطلب ----------
    async def create_volunteer_assignment(self, volunteer_id: int, event_id: int) -> VolunteerAssignment:
        async with self.session_factory() as db:
            volunteer = await db.get(User, volunteer_id)
            if not volunteer:
                raise HTTPException(status_code=404, detail="Volunteer not found")
            if not volunteer.is_volunteer:
                raise HTTPException(status_code=400, detail="User is not a volunteer")

            if not await db.get(Event, event_id):
                raise HTTPException(status_code=404, detail="Event not found")

            assignment = VolunteerAssignment(volunteer_id=volunteer_id, event_id=event_id)
            db.add(assignment)
            try:
                await db.commit()
            except IntegrityError:
                await db.rollback()
                raise HTTPException(status_code=400, detail="Volunteer is already assigned to this event")
            await db.refresh(assignment)
            logger.info(f"Volunteer {volunteer_id} assigned to event {event_id}")
            return assignment

    async def delete_volunteer_assignment(self, assignment_id: int) -> None:
        await self._delete(
            delete(VolunteerAssignment).where(VolunteerAssignment.id == assignment_id),
            not_found="Assignment not found",
        )

    # ---------- هزینه‌کرد ----------
    async def create_fund_usage(self, **fields) -> FundUsage:
        if fields.get("spent_at") is None:
            fields.pop("spent_at", None)

        async with self.session_factory() as db:
            usage = FundUsage(**fields)
            db.add(usage)
            try:
                await db.commit()
            except IntegrityError:
                await db.rollback()
                raise HTTPException(status_code=404, detail="Campaign not found")
            await db.refresh(usage)
            return usage

    # ---------- HELPERS ----------
    async def _delete(self, statement, not_found: str, restricted: str = None) -> None:
        async with self.session_factory() as db:
            try:
                result = await db.execute(statement)
                await db.commit()
            except IntegrityError as e:
                await db.rollback()
                logger.warning(f"Delete refused by store: {e.orig}")
                raise HTTPException(status_code=400, detail=restricted or "Record is still referenced")

            if result.rowcount == 0:
                raise HTTPException(status_code=404, detail=not_found)
