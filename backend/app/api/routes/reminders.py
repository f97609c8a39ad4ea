"""Reminder endpoints - contact nudges and upcoming birthdays."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.models.user import User
from app.schemas.reminder import RemindersResponse
from app.services.friend_service import friend_service
from app.services.reminder_service import reminder_service

router = APIRouter()


@router.get("/{user_id}", response_model=RemindersResponse)
async def get_reminders(
    user_id: int,
    locale: str | None = None,
    birthday_limit: int | None = Query(default=None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    """Friends that are due for contact (at most REMINDER_LIMIT) and birthdays in the next 30 days."""
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")

    friends = await friend_service.list_friends(db, user_id)
    today = date.today()
    return RemindersResponse(
        contacts=reminder_service.contact_reminders(friends, today, locale or user.locale),
        birthdays=reminder_service.birthdays(friends, today, birthday_limit),
    )
