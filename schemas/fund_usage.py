# app/schemas/fund_usage.py
from pydantic import field_validator
from typing import Optional
from decimal import Decimal

from schemas.common import CamelModel, UtcDateTime, parse_positive_amount


class FundUsageCreate(CamelModel):
    campaign_id: int
    description: str
    amount_spent: Decimal
    spent_at: Optional[UtcDateTime] = None

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        if not v.strip():
            raise ValueError("Description is required")
        return v

    @field_validator("amount_spent", mode="before")
    @classmethod
    def validate_amount_spent(cls, v):
        return parse_positive_amount(v, "Amount spent")


class FundUsageRead(CamelModel):
    id: int
    campaign_id: int
    description: str
    amount_spent: Decimal
    spent_at: UtcDateTime


class FundUsageWithCampaign(FundUsageRead):
    campaign_name: str
