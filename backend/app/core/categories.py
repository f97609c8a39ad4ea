"""Friendship-affinity categories and their expected contact intervals."""

from enum import Enum


class AffinityCategory(str, Enum):
    """Friendship closeness tiers, ordered from closest to most distant."""

    SOUL_MATE = "soul_mate"
    CLOSE_FRIEND = "close_friend"
    GOOD_BUDDY = "good_buddy"
    SITUATIONAL = "situational"
    DISTANT = "distant"


# Days a friendship of each category can go without contact.
# Must stay non-decreasing from closest to most distant.
CONTACT_INTERVALS: dict[AffinityCategory, int] = {
    AffinityCategory.SOUL_MATE: 3,
    AffinityCategory.CLOSE_FRIEND: 7,
    AffinityCategory.GOOD_BUDDY: 14,
    AffinityCategory.SITUATIONAL: 30,
    AffinityCategory.DISTANT: 60,
}

CATEGORY_ORDER: tuple[AffinityCategory, ...] = tuple(AffinityCategory)


class InvalidCategoryError(ValueError):
    """A stored category string is not one of the known categories."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown friendship category: {value!r}")


def parse_category(value: str | AffinityCategory) -> AffinityCategory:
    """Coerce a stored category string, raising InvalidCategoryError if unknown."""
    if isinstance(value, AffinityCategory):
        return value
    try:
        return AffinityCategory(value)
    except ValueError:
        raise InvalidCategoryError(value) from None


def closeness_rank(category: str | AffinityCategory) -> int:
    """0 for the closest category, 4 for the most distant."""
    return CATEGORY_ORDER.index(parse_category(category))


def contact_interval(category: str | AffinityCategory) -> int:
    return CONTACT_INTERVALS[parse_category(category)]
