"""Personality service - turns quiz answers into a localized profile.

Two independent reductions of the same answers end up on the profile:
the four personality styles (per-dimension means) and the friendship
category (overall mean). They are not reconciled and may disagree.
"""

from collections.abc import Sequence

from app.core.affinity import classify_affinity
from app.core.personality import classify_styles, description_keys, personality_key, trait_keys
from app.schemas.personality import PersonalityProfile, StyleProfile, UserProfileResult
from app.services.catalog_service import CatalogService, catalog_service


class PersonalityService:
    def __init__(self, catalog: CatalogService = catalog_service):
        self.catalog = catalog

    def resolve(self, styles: StyleProfile, locale: str) -> PersonalityProfile:
        """Attach the localized type name, traits and description to a style combination."""
        traits = [self.catalog.trait(key, locale) for key in trait_keys(styles)]
        sentences = [self.catalog.personality_sentence(key, locale) for key in description_keys(styles)]
        return PersonalityProfile(
            **styles.model_dump(),
            personality_type=self.catalog.personality_type_name(personality_key(styles), locale),
            traits=traits,
            description=" ".join(sentences),
        )

    def classify_personality(self, answers: Sequence[int], locale: str) -> PersonalityProfile:
        return self.resolve(classify_styles(answers), locale)

    def build_profile(self, answers: Sequence[int], locale: str) -> UserProfileResult:
        category = classify_affinity(answers)
        return UserProfileResult(
            category=category,
            category_name=self.catalog.category_name(category, locale),
            description=self.catalog.category_description(category, locale),
            personality=self.classify_personality(answers, locale),
            locale=locale,
        )


personality_service = PersonalityService()
