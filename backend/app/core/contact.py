"""Contact urgency scoring and reminder ranking.

The decay ratio (days since last contact / the category's contact interval)
drives two independent classifications:

- health score: 100 up to ratio 1, 70 up to 1.5, 40 up to 2, then a linear
  taper from 20 that reaches 0 at ratio 4;
- urgency tier: high from ratio 2, medium from 1.5, low below.

The bands intentionally differ (ratio 1.2 scores 70 but is still low urgency).
"""

import math
from collections.abc import Iterable
from datetime import date

from app.config import settings
from app.core.categories import AffinityCategory, closeness_rank, contact_interval, parse_category
from app.schemas.reminder import ContactStatus, ReminderCandidate, UrgencyTier


URGENCY_RANK = {UrgencyTier.HIGH: 0, UrgencyTier.MEDIUM: 1, UrgencyTier.LOW: 2}

# (inclusive upper ratio, score) for the flat part of the health curve
HEALTH_BANDS: list[tuple[float, float]] = [
    (1.0, 100.0),
    (1.5, 70.0),
    (2.0, 40.0),
]
TAPER_START_SCORE = 20.0
TAPER_SLOPE = 10.0  # points lost per unit of ratio beyond 2

MEDIUM_URGENCY_RATIO = 1.5
HIGH_URGENCY_RATIO = 2.0


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores (round() is banker's)."""
    return math.floor(value + 0.5)


def days_since_contact(last_interaction: date | None, today: date) -> int:
    """Whole days since the last interaction.

    A friend who was never contacted counts as MISSING_CONTACT_DAYS (maximally
    overdue). Dates in the future count as contacted today.
    """
    if last_interaction is None:
        return settings.MISSING_CONTACT_DAYS
    return max(0, (today - last_interaction).days)


def decay_ratio(days_since: int, category: str | AffinityCategory) -> float:
    return days_since / contact_interval(category)


def health_score_for_ratio(ratio: float) -> float:
    for upper_ratio, score in HEALTH_BANDS:
        if ratio <= upper_ratio:
            return score
    return max(0.0, TAPER_START_SCORE - (ratio - HEALTH_BANDS[-1][0]) * TAPER_SLOPE)


def urgency_for_ratio(ratio: float) -> UrgencyTier:
    if ratio >= HIGH_URGENCY_RATIO:
        return UrgencyTier.HIGH
    if ratio >= MEDIUM_URGENCY_RATIO:
        return UrgencyTier.MEDIUM
    return UrgencyTier.LOW


def needs_reminder(ratio: float) -> bool:
    """Due once the contact interval has been reached."""
    return ratio >= 1.0


def score_contact(days_since: int, category: str | AffinityCategory) -> ContactStatus:
    """Full urgency/health picture for one friend.

    Raises InvalidCategoryError for an unknown category string.
    """
    category = parse_category(category)
    ratio = decay_ratio(days_since, category)
    raw_score = health_score_for_ratio(ratio)
    return ContactStatus(
        category=category,
        days_since=days_since,
        interval=contact_interval(category),
        ratio=ratio,
        raw_score=raw_score,
        health_score=round_half_up(raw_score),
        urgency=urgency_for_ratio(ratio),
        needs_reminder=needs_reminder(ratio),
    )


def rank_reminders(
    candidates: Iterable[ReminderCandidate], limit: int | None = None
) -> list[ReminderCandidate]:
    """Keep friends that are due, most urgent first, closest friends first on ties.

    At most `limit` (REMINDER_LIMIT by default) entries are returned so the
    user is not overwhelmed.
    """
    if limit is None:
        limit = settings.REMINDER_LIMIT
    due = [c for c in candidates if c.status.needs_reminder]
    due.sort(key=lambda c: (URGENCY_RANK[c.status.urgency], closeness_rank(c.status.category)))
    return due[:limit]
