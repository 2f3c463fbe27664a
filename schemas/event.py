# app/schemas/event.py
from pydantic import field_validator
from typing import List, Optional

from schemas.common import CamelModel, UtcDateTime
from schemas.user import UserSummary


class EventCreate(CamelModel):
    title: str
    description: str
    date: UtcDateTime
    location: str

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError("Event title is required")
        return v.strip()

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        if len(v.strip()) < 10:
            raise ValueError("Description must be at least 10 characters")
        return v

    @field_validator("location")
    @classmethod
    def validate_location(cls, v):
        if not v.strip():
            raise ValueError("Location is required")
        return v.strip()


class EventUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[UtcDateTime] = None
    location: Optional[str] = None

    @field_validator("title", "location")
    @classmethod
    def not_blank(cls, v, info):
        if v is not None and not v.strip():
            raise ValueError(f"{info.field_name.capitalize()} is required")
        return v.strip() if v is not None else v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        if v is not None and len(v.strip()) < 10:
            raise ValueError("Description must be at least 10 characters")
        return v


class EventRead(CamelModel):
    id: int
    title: str
    description: str
    date: UtcDateTime
    location: str
    created_at: UtcDateTime


class EventWithVolunteers(EventRead):
    volunteer_count: int
    volunteers: List[UserSummary] = []


# ---------- تخصیص داوطلب ----------
class VolunteerAssignmentCreate(CamelModel):
    volunteer_id: int
    event_id: int


class VolunteerAssignmentRead(CamelModel):
    id: int
    volunteer_id: int
    event_id: int
    assigned_at: UtcDateTime
