"""Score service - the overall friendship score gauge shown to the user."""

import random
from collections.abc import Sequence
from datetime import date

from app.core.contact import round_half_up
from app.core.gauge import aggregate_health, get_score_level, simulate_score_history
from app.models.friend import Friend
from app.schemas.score import FriendshipScore, ScoreHistory, TrackedFriend
from app.services.catalog_service import CatalogService, catalog_service, localize
from app.services.friend_service import friend_service


class ScoreService:
    def __init__(self, catalog: CatalogService = catalog_service):
        self.catalog = catalog

    def friendship_score(self, friends: Sequence[Friend], today: date, locale: str) -> FriendshipScore:
        statuses = [
            status for status in (friend_service.contact_status(f, today) for f in friends)
            if status is not None
        ]
        summary = aggregate_health(statuses)
        level = get_score_level(summary.score, self.catalog.score_levels())
        return FriendshipScore(
            **summary.model_dump(),
            level=level.key,
            label=localize(level.label, locale),
            emoji=level.emoji,
            description=localize(level.description, locale) or "",
        )

    @staticmethod
    def history(
        friends: Sequence[Friend], today: date, rng: random.Random | None = None
    ) -> ScoreHistory:
        tracked = []
        for friend in friends:
            category = friend_service.safe_category(friend)
            if category is not None:
                tracked.append(TrackedFriend(category=category, last_interaction=friend.last_interaction_date))

        points = simulate_score_history(tracked, today, rng)
        scores = [p.score for p in points]
        return ScoreHistory(
            points=points,
            min_score=min(scores),
            max_score=max(scores),
            average=round_half_up(sum(scores) / len(scores)),
        )


score_service = ScoreService()
