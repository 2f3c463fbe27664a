# app/models/user.py
from sqlalchemy import Column, Integer, String, DateTime, func, Enum
from sqlalchemy.orm import relationship
import enum
from models.base import Base


class UserRole(str, enum.Enum):
    ADMIN = "ADMIN"
    DONOR = "DONOR"
    VOLUNTEER = "VOLUNTEER"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)

    username = Column(String(50), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    name = Column(String(200), nullable=False)

    # no update path: fixed at registration
    role = Column(Enum(UserRole, name="user_role"), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    donations_made = relationship(
        "Donation",
        foreign_keys="Donation.donor_id",
        back_populates="donor",
        passive_deletes="all",
    )

    assignments = relationship(
        "VolunteerAssignment",
        back_populates="volunteer",
        passive_deletes="all",
    )

    @property
    def is_volunteer(self) -> bool:
        return self.role == UserRole.VOLUNTEER
