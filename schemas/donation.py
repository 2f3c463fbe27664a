# app/schemas/donation.py
from pydantic import field_validator
from decimal import Decimal

from schemas.common import CamelModel, UtcDateTime, parse_positive_amount
from schemas.campaign import CampaignSummary
from schemas.user import UserSummary


# ---------- ایجاد کمک ----------
class DonationCreate(CamelModel):
    """Only campaign and amount come from the client; the donor is the caller."""
    campaign_id: int
    amount: Decimal

    @field_validator("campaign_id", mode="before")
    @classmethod
    def validate_campaign_id(cls, v):
        if v is None or v == "":
            raise ValueError("Campaign is required")
        return v

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v):
        return parse_positive_amount(v, "Donation amount")


class DonationRead(CamelModel):
    id: int
    donor_id: int
    campaign_id: int
    amount: Decimal
    receipt_id: str
    created_at: UtcDateTime


class DonationWithDetails(DonationRead):
    donor: UserSummary
    campaign: CampaignSummary
