"""Friendship score (gauge) Pydantic schemas."""

from datetime import date

from pydantic import BaseModel

from app.core.categories import AffinityCategory


class TrackedFriend(BaseModel):
    """A categorized friend as seen by the gauge."""
    category: AffinityCategory
    last_interaction: date | None = None


class HealthSummary(BaseModel):
    score: int
    on_time_count: int = 0
    overdue_count: int = 0
    total_tracked: int = 0


class ScoreLevel(BaseModel):
    """A qualitative band of the gauge, as configured in the catalog."""
    key: str
    min_score: int
    emoji: str = ""
    label: dict[str, str]
    description: dict[str, str] = {}


class FriendshipScore(HealthSummary):
    level: str
    label: str
    emoji: str
    description: str


class HistoryPoint(BaseModel):
    date: date
    score: int


class ScoreHistory(BaseModel):
    """Synthesized trend, not a recorded history."""
    points: list[HistoryPoint]
    min_score: int
    max_score: int
    average: int
