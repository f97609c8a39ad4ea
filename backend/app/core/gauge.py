"""Aggregate friendship-health gauge and its simulated 30-day trend."""

import math
import random
from collections.abc import Iterable, Sequence
from datetime import date, timedelta

from app.config import settings
from app.core.contact import days_since_contact, round_half_up, score_contact
from app.schemas.reminder import ContactStatus
from app.schemas.score import HealthSummary, HistoryPoint, ScoreLevel, TrackedFriend

# Score shown when nobody is tracked yet: no data counts as healthy
EMPTY_GAUGE_SCORE = 100

ON_TIME_MAX_RATIO = 1.0
OVERDUE_MIN_RATIO = 1.5


def aggregate_health(statuses: Iterable[ContactStatus]) -> HealthSummary:
    """Mean health score over all tracked friends, rounded half up."""
    statuses = list(statuses)
    if not statuses:
        return HealthSummary(score=EMPTY_GAUGE_SCORE)

    total = sum(s.raw_score for s in statuses)
    return HealthSummary(
        score=round_half_up(total / len(statuses)),
        on_time_count=sum(1 for s in statuses if s.ratio <= ON_TIME_MAX_RATIO),
        overdue_count=sum(1 for s in statuses if s.ratio > OVERDUE_MIN_RATIO),
        total_tracked=len(statuses),
    )


def score_on(friends: Sequence[TrackedFriend], day: date) -> int:
    """Gauge score as it would have been computed on `day`."""
    return aggregate_health(
        score_contact(days_since_contact(f.last_interaction, day), f.category)
        for f in friends
    ).score


def get_score_level(score: int, levels: Sequence[ScoreLevel]) -> ScoreLevel:
    """Pick the highest band whose min_score the score reaches."""
    ordered = sorted(levels, key=lambda level: level.min_score)
    current = ordered[0]
    for level in ordered:
        if score >= level.min_score:
            current = level
    return current


def simulate_score_history(
    friends: Sequence[TrackedFriend],
    today: date,
    rng: random.Random | None = None,
    days: int | None = None,
) -> list[HistoryPoint]:
    """Synthesize a daily trend ending today, oldest first.

    There is no stored score history: each day's value is the score the
    current friend list would have had on that day, plus a sinusoid and up
    to 5 points of random noise, clamped to 0..100.
    """
    rng = rng or random.Random()
    if days is None:
        days = settings.HISTORY_DAYS

    points = []
    for days_ago in range(days - 1, -1, -1):
        day = today - timedelta(days=days_ago)
        variation = math.sin(days_ago * 0.5) * 10 + rng.random() * 5
        score = max(0, min(100, round_half_up(score_on(friends, day) + variation)))
        points.append(HistoryPoint(date=day, score=score))
    return points
