# app/services/export_service.py
import csv
import io
from typing import Any, Callable, List, Sequence, Tuple

from schemas.campaign import CampaignWithStats
from schemas.fund_usage import FundUsageWithCampaign

Column = Tuple[str, Callable[[Any], Any]]


class ExportService:
    """CSV rendering of report rows: header first, every field quoted."""

    CAMPAIGN_COLUMNS: List[Column] = [
        ("Campaign Name", lambda c: c.name),
        ("Goal Amount", lambda c: c.goal_amount),
        ("Raised", lambda c: c.total_donations),
        ("Progress %", lambda c: c.progress_percentage),
        ("Donors", lambda c: c.donor_count),
    ]

    FUND_USAGE_COLUMNS: List[Column] = [
        ("Campaign", lambda f: f.campaign_name),
        ("Description", lambda f: f.description),
        ("Amount Spent", lambda f: f.amount_spent),
        ("Date", lambda f: f.spent_at.date().isoformat()),
    ]

    @staticmethod
    def to_csv(columns: Sequence[Column], records: Sequence[Any]) -> str:
        output = io.StringIO()
        # QUOTE_ALL doubles any embedded quote characters
        writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")

        writer.writerow([header for header, _ in columns])
        for record in records:
            writer.writerow([getter(record) for _, getter in columns])

        return output.getvalue()

    @classmethod
    def campaigns_csv(cls, campaigns: Sequence[CampaignWithStats]) -> str:
        return cls.to_csv(cls.CAMPAIGN_COLUMNS, campaigns)

    @classmethod
    def fund_usage_csv(cls, fund_usage: Sequence[FundUsageWithCampaign]) -> str:
        return cls.to_csv(cls.FUND_USAGE_COLUMNS, fund_usage)
