"""Friend service - friend records as seen by the scoring engine."""

import logging
from collections.abc import Sequence
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.affinity import classify_affinity
from app.core.categories import AffinityCategory, InvalidCategoryError, parse_category
from app.core.contact import days_since_contact, score_contact
from app.models.contact_event import ContactEvent
from app.models.friend import Friend
from app.schemas.reminder import ContactStatus
from app.services.catalog_service import catalog_service

logger = logging.getLogger(__name__)


class FriendService:
    @staticmethod
    def safe_category(friend: Friend) -> AffinityCategory | None:
        """Friend's category, or None when missing or corrupted in storage."""
        if friend.category is None:
            return None
        try:
            return parse_category(friend.category)
        except InvalidCategoryError as e:
            logger.warning("Friend %s treated as uncategorized: %s", friend.id, e)
            return None

    @classmethod
    def contact_status(cls, friend: Friend, today: date) -> ContactStatus | None:
        category = cls.safe_category(friend)
        if category is None:
            return None
        return score_contact(days_since_contact(friend.last_interaction_date, today), category)

    @staticmethod
    async def list_friends(db: AsyncSession, user_id: int) -> Sequence[Friend]:
        result = await db.execute(
            select(Friend).where(Friend.user_id == user_id).order_by(Friend.id)
        )
        return result.scalars().all()

    @staticmethod
    def apply_quiz(friend: Friend, answers: list[int], locale: str) -> AffinityCategory:
        """Categorize a friend from their own quiz answers."""
        category = classify_affinity(answers)
        friend.category = category.value
        friend.description = catalog_service.category_description(category, locale)
        friend.quiz_answers = list(answers)
        return category

    @staticmethod
    async def record_contact(
        db: AsyncSession,
        friend: Friend,
        contacted_on: date,
        source: str,
        note: str | None = None,
    ) -> Friend:
        """Log a contact and move the friend's last interaction forward."""
        db.add(ContactEvent(
            friend_id=friend.id,
            contacted_on=contacted_on,
            source=source,
            note=note,
        ))

        # An older back-dated check-in must not rewind a newer interaction
        if friend.last_interaction_date is None or contacted_on > friend.last_interaction_date:
            friend.last_interaction_date = contacted_on
        await db.flush()
        return friend


friend_service = FriendService()
