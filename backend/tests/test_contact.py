"""Tests for contact urgency scoring and reminder ranking."""

from datetime import date, timedelta

import pytest

from app.core.categories import AffinityCategory, InvalidCategoryError
from app.core.contact import (
    days_since_contact,
    health_score_for_ratio,
    rank_reminders,
    round_half_up,
    score_contact,
    urgency_for_ratio,
)
from app.schemas.reminder import ReminderCandidate, UrgencyTier

TODAY = date(2024, 6, 15)


# ---------------------------------------------------------------------------
# Days since contact
# ---------------------------------------------------------------------------


def test_days_since_contact():
    assert days_since_contact(TODAY - timedelta(days=10), TODAY) == 10
    assert days_since_contact(TODAY, TODAY) == 0


def test_never_contacted_counts_as_missing():
    assert days_since_contact(None, TODAY) == 999


def test_future_contact_clamps_to_zero():
    assert days_since_contact(TODAY + timedelta(days=3), TODAY) == 0


# ---------------------------------------------------------------------------
# Health score and urgency bands
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("days,ratio,score,urgency", [
    (0, 0.0, 100, UrgencyTier.LOW),
    (60, 1.0, 100, UrgencyTier.LOW),
    (72, 1.2, 70, UrgencyTier.LOW),
    (90, 1.5, 70, UrgencyTier.MEDIUM),
    (120, 2.0, 40, UrgencyTier.HIGH),
    (150, 2.5, 15, UrgencyTier.HIGH),
    (240, 4.0, 0, UrgencyTier.HIGH),
    (600, 10.0, 0, UrgencyTier.HIGH),
])
def test_distant_friend_decay(days, ratio, score, urgency):
    status = score_contact(days, "distant")
    assert status.ratio == pytest.approx(ratio)
    assert status.health_score == score
    assert status.urgency == urgency


def test_health_score_taper_is_linear():
    assert health_score_for_ratio(2.01) == pytest.approx(19.9)
    assert health_score_for_ratio(3.0) == pytest.approx(10.0)
    assert health_score_for_ratio(3.5) == pytest.approx(5.0)


def test_health_score_never_increases_with_ratio():
    ratios = [i / 10 for i in range(0, 60)]
    scores = [health_score_for_ratio(r) for r in ratios]
    assert scores == sorted(scores, reverse=True)
    assert all(0 <= s <= 100 for s in scores)


def test_urgency_thresholds():
    assert urgency_for_ratio(1.49) == UrgencyTier.LOW
    assert urgency_for_ratio(1.5) == UrgencyTier.MEDIUM
    assert urgency_for_ratio(1.99) == UrgencyTier.MEDIUM
    assert urgency_for_ratio(2.0) == UrgencyTier.HIGH


def test_reminder_due_from_interval():
    assert not score_contact(6, "close_friend").needs_reminder
    assert score_contact(7, "close_friend").needs_reminder


def test_status_carries_interval_and_raw_score():
    status = score_contact(5, AffinityCategory.SOUL_MATE)
    assert status.category == AffinityCategory.SOUL_MATE
    assert status.interval == 3
    assert status.days_since == 5
    assert status.ratio == pytest.approx(5 / 3)
    assert status.raw_score == 40.0


def test_score_contact_rejects_unknown_category():
    with pytest.raises(InvalidCategoryError):
        score_contact(10, "acquaintance")


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(84.5) == 85
    assert round_half_up(84.49) == 84
    assert round_half_up(0.0) == 0


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------


def _candidate(friend_id, days, category):
    return ReminderCandidate(friend_id=friend_id, name=f"f{friend_id}", status=score_contact(days, category))


def test_rank_orders_by_urgency_then_closeness():
    candidates = [
        _candidate(1, 8, "close_friend"),      # ratio 1.14 -> low
        _candidate(2, 70, "situational"),      # ratio 2.33 -> high
        _candidate(3, 7, "soul_mate"),         # ratio 2.33 -> high
        _candidate(4, 22, "good_buddy"),       # ratio 1.57 -> medium
    ]
    ranked = rank_reminders(candidates, limit=10)
    assert [c.friend_id for c in ranked] == [3, 2, 4, 1]


def test_rank_drops_friends_not_yet_due():
    candidates = [_candidate(1, 2, "soul_mate"), _candidate(2, 3, "soul_mate")]
    ranked = rank_reminders(candidates, limit=10)
    assert [c.friend_id for c in ranked] == [2]


def test_rank_keeps_input_order_on_full_ties():
    candidates = [_candidate(i, 30, "close_friend") for i in (5, 2, 9)]
    ranked = rank_reminders(candidates, limit=10)
    assert [c.friend_id for c in ranked] == [5, 2, 9]


def test_rank_applies_default_limit():
    candidates = [_candidate(i, 100, "good_buddy") for i in range(6)]
    assert len(rank_reminders(candidates)) == 3


def test_rank_empty():
    assert rank_reminders([]) == []
