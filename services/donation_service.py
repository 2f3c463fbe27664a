# app/services/donation_service.py
import logging

from fastapi import HTTPException

from models.donation import Donation
from schemas.donation import DonationCreate
from schemas.user import AuthenticatedIdentity
from services.receipt_service import ReceiptService
from services.storage import CharityStorage

logger = logging.getLogger(__name__)


class DonationService:
    def __init__(self, storage: CharityStorage):
        self.storage = storage

    async def create_donation(self, donation_data: DonationCreate, donor: AuthenticatedIdentity) -> Donation:
        """Record a donation. Nothing is charged; the row is the whole transaction."""
        donation = await self.storage.create_donation(
            donor_id=donor.id,
            campaign_id=donation_data.campaign_id,
            amount=donation_data.amount,
        )
        logger.info(
            f"Donation {donation.id} of {donation.amount} to campaign {donation.campaign_id} "
            f"recorded with receipt {donation.receipt_id}"
        )
        return donation

    async def get_own_donation(self, donation_id: int, donor: AuthenticatedIdentity) -> Donation:
        # someone else's donation looks exactly like a missing one
        donation = await self.storage.get_donation(donation_id)
        if not donation or donation.donor_id != donor.id:
            raise HTTPException(status_code=404, detail="Donation not found")
        return donation

    async def render_receipt(self, donation_id: int, donor: AuthenticatedIdentity) -> str:
        donation = await self.get_own_donation(donation_id, donor)
        campaign = await self.storage.get_campaign(donation.campaign_id)
        return ReceiptService.render(donation, campaign_name=campaign.name if campaign else None)
