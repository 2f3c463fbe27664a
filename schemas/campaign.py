# app/schemas/campaign.py
from pydantic import field_validator
from typing import Optional
from decimal import Decimal

from models.campaign import CampaignStatus
from schemas.common import CamelModel, UtcDateTime, parse_positive_amount


def _validate_name(v):
    v = v.strip()
    if not v:
        raise ValueError("Campaign name is required")
    return v


def _validate_description(v):
    if len(v.strip()) < 10:
        raise ValueError("Description must be at least 10 characters")
    return v


# ---------- ایجاد کمپین ----------
class CampaignCreate(CamelModel):
    name: str
    description: str
    goal_amount: Decimal

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _validate_name(v)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        return _validate_description(v)

    @field_validator("goal_amount", mode="before")
    @classmethod
    def validate_goal_amount(cls, v):
        return parse_positive_amount(v, "Goal amount")


# ---------- به‌روزرسانی کمپین ----------
class CampaignUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    goal_amount: Optional[Decimal] = None
    status: Optional[CampaignStatus] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return _validate_name(v) if v is not None else v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        return _validate_description(v) if v is not None else v

    @field_validator("goal_amount", mode="before")
    @classmethod
    def validate_goal_amount(cls, v):
        return parse_positive_amount(v, "Goal amount") if v is not None else v


# ---------- پاسخ کمپین ----------
class CampaignRead(CamelModel):
    id: int
    name: str
    description: str
    goal_amount: Decimal
    status: CampaignStatus
    created_at: UtcDateTime


class CampaignWithStats(CampaignRead):
    total_donations: Decimal
    donor_count: int
    progress_percentage: int


class CampaignSummary(CamelModel):
    id: int
    name: str
