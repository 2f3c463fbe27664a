# app/schemas/stats.py
from typing import Optional
from decimal import Decimal

from schemas.common import CamelModel, UtcDateTime


class AdminStats(CamelModel):
    total_campaigns: int
    # number of donation records, not an amount
    total_donations: int
    active_volunteers: int
    total_raised: Decimal


class DonorStats(CamelModel):
    total_donated: Decimal
    campaigns_supported: int
    last_donation: Optional[UtcDateTime] = None


class VolunteerStats(CamelModel):
    upcoming_events: int
    total_events: int
    hours_volunteered: int
