"""Personality-related Pydantic schemas."""

from pydantic import BaseModel, Field

from app.core.categories import AffinityCategory


class DimensionScores(BaseModel):
    """Mean answer per dimension on the 0-3 scale."""
    social: float
    decision: float
    energy: float
    leadership: float

    model_config = {"frozen": True}


class StyleProfile(BaseModel):
    social_style: str
    decision_style: str
    energy_style: str
    leadership_style: str

    model_config = {"frozen": True}

    def as_tuple(self) -> tuple[str, str, str, str]:
        return (self.social_style, self.decision_style, self.energy_style, self.leadership_style)


class PersonalityProfile(StyleProfile):
    personality_type: str
    traits: list[str]
    description: str = ""


class UserProfileResult(BaseModel):
    """What the profile screen shows after a finished quiz."""
    category: AffinityCategory
    category_name: str = ""
    description: str
    personality: PersonalityProfile
    locale: str = Field(default="en", max_length=10)
