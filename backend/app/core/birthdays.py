"""Birthday projector - next occurrence of a stored birthdate and days until it."""

from collections.abc import Iterable
from datetime import date

from app.config import settings
from app.schemas.reminder import BirthdayEntry, UpcomingBirthday


def _on_year(birthday: date, year: int) -> date:
    # Feb 29 rolls over to Mar 1 in non-leap years
    try:
        return birthday.replace(year=year)
    except ValueError:
        return date(year, 3, 1)


def project_birthday(birthday: date, today: date) -> date:
    """Next occurrence of the birthday's month/day, today included."""
    this_year = _on_year(birthday, today.year)
    if this_year < today:
        return _on_year(birthday, today.year + 1)
    return this_year


def days_until_birthday(birthday: date, today: date) -> int:
    return (project_birthday(birthday, today) - today).days


def upcoming_birthdays(
    entries: Iterable[BirthdayEntry],
    today: date,
    window_days: int | None = None,
) -> list[UpcomingBirthday]:
    """Birthdays falling within the next `window_days` days, soonest first."""
    if window_days is None:
        window_days = settings.BIRTHDAY_WINDOW_DAYS

    upcoming = []
    for entry in entries:
        next_birthday = project_birthday(entry.birthday, today)
        days_until = (next_birthday - today).days
        if 0 <= days_until <= window_days:
            upcoming.append(UpcomingBirthday(
                friend_id=entry.friend_id,
                name=entry.name,
                days_until=days_until,
                next_birthday=next_birthday,
            ))
    return sorted(upcoming, key=lambda b: b.days_until)
