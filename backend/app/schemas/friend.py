"""Friend-related Pydantic schemas."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from app.core.categories import AffinityCategory
from app.schemas.quiz import Answer
from app.schemas.reminder import ContactStatus


class FriendCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    birthday: date | None = None
    category: AffinityCategory | None = None
    last_interaction_date: date | None = None


class FriendUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    birthday: date | None = None
    category: AffinityCategory | None = None
    last_interaction_date: date | None = None


class FriendState(BaseModel):
    id: int
    user_id: int
    name: str
    birthday: date | None
    category: AffinityCategory | None  # None also when the stored value is corrupted
    description: str | None
    last_interaction_date: date | None
    contact: ContactStatus | None = None  # only for categorized friends
    created_at: datetime


class FriendQuizSubmission(BaseModel):
    """Answers given by the friend themselves through an invite link."""
    answers: list[Answer] = Field(min_length=1)
    locale: str = Field(default="en", min_length=2, max_length=10)


class ContactAck(BaseModel):
    """The user got in touch with a friend (usually from a reminder)."""
    contacted_on: date | None = None  # defaults to today
    source: str = Field(default="reminder", max_length=50)
    note: str | None = None
