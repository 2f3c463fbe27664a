# app/models/campaign.py
from sqlalchemy import Column, Integer, String, Numeric, DateTime, Text, Enum, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import enum
from models.base import Base


class CampaignStatus(str, enum.Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class Campaign(Base):
    __tablename__ = "campaigns"
    __table_args__ = (
        CheckConstraint("goal_amount > 0", name="ck_campaigns_goal_positive"),
    )

    id = Column(Integer, primary_key=True)

    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    goal_amount = Column(Numeric(12, 2), nullable=False)

    status = Column(
        Enum(CampaignStatus, name="campaign_status", values_callable=lambda e: [m.value for m in e]),
        default=CampaignStatus.ACTIVE,
        nullable=False,
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # 🔗 Relationships (deletes are restricted by the foreign keys)
    donations = relationship("Donation", back_populates="campaign", passive_deletes="all")
    fund_usages = relationship("FundUsage", back_populates="campaign", passive_deletes="all")
