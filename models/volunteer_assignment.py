# app/models/volunteer_assignment.py
from sqlalchemy import Column, Integer, DateTime, func, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from models.base import Base


class VolunteerAssignment(Base):
    __tablename__ = "volunteer_assignments"
    __table_args__ = (
        UniqueConstraint("volunteer_id", "event_id", name="uq_volunteer_assignments_pair"),
    )

    id = Column(Integer, primary_key=True)

    volunteer_id = Column(Integer, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)

    assigned_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    volunteer = relationship("User", back_populates="assignments")
    event = relationship("Event", back_populates="assignments")
