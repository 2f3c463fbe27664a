# app/models/fund_usage.py
from sqlalchemy import Column, Integer, Numeric, Text, DateTime, func, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from models.base import Base


class FundUsage(Base):
    __tablename__ = "fund_usage"
    __table_args__ = (
        CheckConstraint("amount_spent > 0", name="ck_fund_usage_amount_positive"),
    )

    id = Column(Integer, primary_key=True)

    campaign_id = Column(Integer, ForeignKey("campaigns.id", ondelete="RESTRICT"), nullable=False, index=True)
    description = Column(Text, nullable=False)
    amount_spent = Column(Numeric(12, 2), nullable=False)

    spent_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    campaign = relationship("Campaign", back_populates="fund_usages")
