"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.core.categories import AffinityCategory


class UserCreate(BaseModel):
    name: str = Field(default="Friend", min_length=1, max_length=100)
    locale: str = Field(default="en", min_length=2, max_length=10)


class UserUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    locale: str | None = Field(default=None, min_length=2, max_length=10)


class UserState(BaseModel):
    id: int
    name: str
    locale: str
    category: AffinityCategory | None = None
    category_name: str = ""
    description: str | None
    personality: dict | None
    quiz_completed_at: datetime | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class UserResetResponse(BaseModel):
    message: str
    user: UserState
