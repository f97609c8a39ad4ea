"""Personality engine - reduces quiz answers to four dimension styles.

Each quiz question feeds exactly one of four dimensions (social, decision,
energy, leadership). A dimension's answers are averaged on the 0-3 answer
scale and the mean is bucketed into one of three styles. The four styles
together form the personality key used to look up localized type names.
"""

from collections.abc import Sequence

from app.schemas.personality import DimensionScores, StyleProfile

DIMENSIONS = ("social", "decision", "energy", "leadership")

# Score used when no answer for a dimension is present (middle of 0..3)
SCALE_MIDPOINT = 1.5

QUESTION_DIMENSION_MAP: dict[int, str] = {
    0: "social",      # meeting new people
    1: "energy",      # time alone, stress
    2: "decision",    # failures, planning
    3: "decision",    # trying new things
    4: "leadership",  # role in a group
    5: "social",      # empathy, criticism
    6: "social",      # center of attention
    7: "decision",    # problem solving
    8: "energy",      # what makes you happy
    9: "leadership",  # surprises, motivation
}

# Low score -> first style, high score -> last style
STYLE_LABELS: dict[str, tuple[str, str, str]] = {
    "social": ("extrovert", "ambivert", "introvert"),
    "decision": ("analytical", "balanced", "creative"),
    "energy": ("active", "moderate", "calm"),
    "leadership": ("leader", "collaborator", "supporter"),
}

LOW_CUTOFF = 1.0
HIGH_CUTOFF = 2.0

# Catalog keys of the trait words shown for each style
STYLE_TRAITS: dict[str, dict[str, tuple[str, ...]]] = {
    "social": {
        "extrovert": ("sociable", "open"),
        "ambivert": ("adaptive", "flexible"),
        "introvert": ("thoughtful", "deep"),
    },
    "decision": {
        "analytical": ("logical", "rational"),
        "balanced": ("balanced", "pragmatic"),
        "creative": ("creative", "intuitive"),
    },
    "energy": {
        "active": ("energetic",),
        "moderate": ("moderate_trait",),
        "calm": ("calm",),
    },
    "leadership": {
        "leader": ("leader",),
        "collaborator": ("team_player",),
        "supporter": ("supportive",),
    },
}

KEY_SEPARATOR = "-"


def calculate_dimension_scores(answers: Sequence[int]) -> DimensionScores:
    """Average the answers of each dimension.

    Answers at indices missing from QUESTION_DIMENSION_MAP are ignored. A
    dimension that received no answers (short vector) scores SCALE_MIDPOINT.
    """
    totals = {dimension: 0 for dimension in DIMENSIONS}
    counts = {dimension: 0 for dimension in DIMENSIONS}

    for index, answer in enumerate(answers):
        dimension = QUESTION_DIMENSION_MAP.get(index)
        if dimension is None:
            continue
        totals[dimension] += answer
        counts[dimension] += 1

    return DimensionScores(**{
        dimension: totals[dimension] / counts[dimension] if counts[dimension] else SCALE_MIDPOINT
        for dimension in DIMENSIONS
    })


def bucket_style(dimension: str, score: float) -> str:
    """Map a dimension mean to its style label.

    Buckets are closed below and open above: 1.0 is already the middle style
    and 2.0 is already the high style.
    """
    low, middle, high = STYLE_LABELS[dimension]
    if score < LOW_CUTOFF:
        return low
    if score < HIGH_CUTOFF:
        return middle
    return high


def classify_styles(answers: Sequence[int]) -> StyleProfile:
    scores = calculate_dimension_scores(answers)
    return StyleProfile(
        social_style=bucket_style("social", scores.social),
        decision_style=bucket_style("decision", scores.decision),
        energy_style=bucket_style("energy", scores.energy),
        leadership_style=bucket_style("leadership", scores.leadership),
    )


def personality_key(styles: StyleProfile) -> str:
    """e.g. 'introvert-balanced-calm-supporter'"""
    return KEY_SEPARATOR.join(styles.as_tuple())


def trait_keys(styles: StyleProfile) -> list[str]:
    """Trait catalog keys in dimension order (social first)."""
    keys: list[str] = []
    for dimension, style in zip(DIMENSIONS, styles.as_tuple()):
        keys.extend(STYLE_TRAITS[dimension][style])
    return keys


def description_keys(styles: StyleProfile) -> list[str]:
    """Catalog keys of the per-dimension sentences, e.g. 'social.introvert'."""
    return [f"{dimension}.{style}" for dimension, style in zip(DIMENSIONS, styles.as_tuple())]
