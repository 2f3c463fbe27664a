# app/models/donation.py
from sqlalchemy import Column, Integer, String, Numeric, DateTime, func, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
import uuid
from models.base import Base


class Donation(Base):
    __tablename__ = "donations"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_donations_amount_positive"),
    )

    id = Column(Integer, primary_key=True)

    amount = Column(Numeric(12, 2), nullable=False)

    # generated once on insert, never reissued
    receipt_id = Column(
        String(36),
        unique=True,
        nullable=False,
        default=lambda: str(uuid.uuid4()),
    )

    # Foreign Keys
    donor_id = Column(Integer, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True)
    campaign_id = Column(Integer, ForeignKey("campaigns.id", ondelete="RESTRICT"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    donor = relationship("User", foreign_keys=[donor_id], back_populates="donations_made")
    campaign = relationship("Campaign", back_populates="donations")
