"""Affinity classifier - one overall answer mean bucketed into a friendship category.

Independent of the personality dimensions: the whole answer vector is
averaged at once. Lower answers mean a deeper, more committed friendship
style.
"""

from collections.abc import Sequence

from app.core.categories import AffinityCategory
from app.core.personality import SCALE_MIDPOINT

# (exclusive upper bound, category); anything above the last bound is distant
AFFINITY_THRESHOLDS: list[tuple[float, AffinityCategory]] = [
    (0.8, AffinityCategory.SOUL_MATE),
    (1.4, AffinityCategory.CLOSE_FRIEND),
    (2.0, AffinityCategory.GOOD_BUDDY),
    (2.6, AffinityCategory.SITUATIONAL),
]


def overall_mean(answers: Sequence[int]) -> float:
    if not answers:
        return SCALE_MIDPOINT
    return sum(answers) / len(answers)


def category_for_mean(mean: float) -> AffinityCategory:
    for upper_bound, category in AFFINITY_THRESHOLDS:
        if mean < upper_bound:
            return category
    return AffinityCategory.DISTANT


def classify_affinity(answers: Sequence[int]) -> AffinityCategory:
    return category_for_mean(overall_mean(answers))
