"""Reminder-related Pydantic schemas (contact reminders and birthdays)."""

from datetime import date
from enum import Enum

from pydantic import BaseModel

from app.core.categories import AffinityCategory


class UrgencyTier(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ContactStatus(BaseModel):
    """Decay of one friendship since the last contact."""
    category: AffinityCategory
    days_since: int
    interval: int  # expected contact interval for the category, in days
    ratio: float
    raw_score: float  # unrounded health score, averaged by the gauge
    health_score: int
    urgency: UrgencyTier
    needs_reminder: bool


class ReminderCandidate(BaseModel):
    friend_id: int
    name: str = ""
    status: ContactStatus


class ContactReminder(BaseModel):
    friend_id: int
    name: str
    category: AffinityCategory
    urgency: UrgencyTier
    days_since: int
    message: str


class BirthdayEntry(BaseModel):
    friend_id: int
    name: str = ""
    birthday: date


class UpcomingBirthday(BaseModel):
    friend_id: int
    name: str
    days_until: int
    next_birthday: date


class RemindersResponse(BaseModel):
    contacts: list[ContactReminder]
    birthdays: list[UpcomingBirthday]
