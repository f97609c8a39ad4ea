"""Catalog service - loads localized lookup tables from YAML.

Every lookup falls back to the base locale when the requested locale has no
entry, so an unknown locale never raises.
"""

import logging
from pathlib import Path

import yaml

from app.core.categories import AffinityCategory
from app.schemas.quiz import QuizQuestion
from app.schemas.score import ScoreLevel

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent / "data"

BASE_LOCALE = "en"
DEFAULT_QUIZ = "friendship_style"


def localize(entry: dict[str, str] | None, locale: str) -> str | None:
    """Pick the locale's string from a {locale: text} entry, else the base locale."""
    if not entry:
        return None
    return entry.get(locale) or entry.get(BASE_LOCALE)


class CatalogService:
    def __init__(self, data_dir: Path = DATA_DIR):
        self.data_dir = data_dir
        self._cache: dict[str, dict] = {}

    def load(self, name: str) -> dict:
        """Load (and cache) a YAML catalog by file stem."""
        if name in self._cache:
            return self._cache[name]

        file_path = self.data_dir / f"{name}.yaml"
        if not file_path.exists():
            raise FileNotFoundError(f"Catalog file not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        logger.debug("Loaded catalog %s", file_path.name)
        self._cache[name] = raw
        return raw

    # --- Personality ---

    def personality_type_name(self, key: str, locale: str) -> str:
        """Localized type name for a personality key, or the 'unique personality' default."""
        catalog = self.load("personality")
        name = localize(catalog["types"].get(key), locale)
        if name is None:
            return localize(catalog["default_type"], locale)
        return name

    def trait(self, key: str, locale: str) -> str:
        return localize(self.load("personality")["traits"][key], locale)

    def personality_sentence(self, key: str, locale: str) -> str:
        return localize(self.load("personality")["descriptions"][key], locale)

    # --- Friendship categories ---

    def _category(self, category: AffinityCategory) -> dict:
        return self.load("friendship")["categories"][AffinityCategory(category).value]

    def category_name(self, category: AffinityCategory, locale: str) -> str:
        return localize(self._category(category)["name"], locale)

    def category_description(self, category: AffinityCategory, locale: str) -> str:
        return localize(self._category(category)["description"], locale)

    def reminder_messages(self, category: AffinityCategory, locale: str) -> list[str]:
        pools = self._category(category)["messages"]
        return pools.get(locale) or pools[BASE_LOCALE]

    def score_levels(self) -> list[ScoreLevel]:
        return [ScoreLevel(**level) for level in self.load("friendship")["score_levels"]]

    # --- Quiz ---

    def quiz_questions(self, locale: str, quiz_id: str = DEFAULT_QUIZ) -> list[QuizQuestion]:
        raw = self.load(f"quiz/{quiz_id}")
        questions = raw["questions"].get(locale) or raw["questions"][BASE_LOCALE]
        return [QuizQuestion(**q) for q in questions]

    def quiz_length(self, quiz_id: str = DEFAULT_QUIZ) -> int:
        return len(self.load(f"quiz/{quiz_id}")["questions"][BASE_LOCALE])


catalog_service = CatalogService()
