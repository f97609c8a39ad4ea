"""Reminder service - who to contact next and whose birthday is coming up."""

import random
from collections.abc import Sequence
from datetime import date

from app.core.birthdays import upcoming_birthdays
from app.core.categories import AffinityCategory
from app.core.contact import rank_reminders
from app.models.friend import Friend
from app.schemas.reminder import BirthdayEntry, ContactReminder, ReminderCandidate, UpcomingBirthday
from app.services.catalog_service import CatalogService, catalog_service
from app.services.friend_service import friend_service


class ReminderService:
    def __init__(self, catalog: CatalogService = catalog_service, rng: random.Random | None = None):
        self.catalog = catalog
        self.rng = rng or random.Random()

    def pick_message(self, category: AffinityCategory, locale: str) -> str:
        """A random nudge from the category's pool; varies between calls on purpose."""
        return self.rng.choice(self.catalog.reminder_messages(category, locale))

    def contact_reminders(
        self,
        friends: Sequence[Friend],
        today: date,
        locale: str,
        limit: int | None = None,
    ) -> list[ContactReminder]:
        candidates = []
        for friend in friends:
            status = friend_service.contact_status(friend, today)
            if status is not None:
                candidates.append(ReminderCandidate(friend_id=friend.id, name=friend.name, status=status))

        return [
            ContactReminder(
                friend_id=c.friend_id,
                name=c.name,
                category=c.status.category,
                urgency=c.status.urgency,
                days_since=c.status.days_since,
                message=self.pick_message(c.status.category, locale),
            )
            for c in rank_reminders(candidates, limit)
        ]

    @staticmethod
    def birthdays(
        friends: Sequence[Friend], today: date, limit: int | None = None
    ) -> list[UpcomingBirthday]:
        entries = [
            BirthdayEntry(friend_id=f.id, name=f.name, birthday=f.birthday)
            for f in friends
            if f.birthday is not None
        ]
        upcoming = upcoming_birthdays(entries, today)
        return upcoming if limit is None else upcoming[:limit]


reminder_service = ReminderService()
