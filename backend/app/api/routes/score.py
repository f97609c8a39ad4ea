"""Friendship score endpoints - overall gauge and its trend."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.models.user import User
from app.schemas.score import FriendshipScore, ScoreHistory
from app.services.friend_service import friend_service
from app.services.score_service import score_service

router = APIRouter()


async def _get_user_or_404(user_id: int, db: AsyncSession) -> User:
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/{user_id}", response_model=FriendshipScore)
async def get_score(user_id: int, locale: str | None = None, db: AsyncSession = Depends(get_db)):
    """Overall relationship health (0-100) with its qualitative band."""
    user = await _get_user_or_404(user_id, db)
    friends = await friend_service.list_friends(db, user_id)
    return score_service.friendship_score(friends, date.today(), locale or user.locale)


@router.get("/{user_id}/history", response_model=ScoreHistory)
async def get_score_history(user_id: int, db: AsyncSession = Depends(get_db)):
    """Simulated 30-day trend around the current score (not a stored history)."""
    await _get_user_or_404(user_id, db)
    friends = await friend_service.list_friends(db, user_id)
    return score_service.history(friends, date.today())
