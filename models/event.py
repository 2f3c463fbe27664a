# app/models/event.py
from sqlalchemy import Column, Integer, String, Text, DateTime, func
from sqlalchemy.orm import relationship
from models.base import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True)

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    location = Column(String(255), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    assignments = relationship(
        "VolunteerAssignment",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
