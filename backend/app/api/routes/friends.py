"""Friend endpoints - friend list CRUD, friend quiz results, contact check-ins."""

import logging
from datetime import date
from enum import Enum

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.models.contact_event import ContactEvent
from app.models.friend import Friend
from app.models.user import User
from app.schemas.friend import ContactAck, FriendCreate, FriendQuizSubmission, FriendState, FriendUpdate
from app.services.friend_service import friend_service

logger = logging.getLogger(__name__)

router = APIRouter()


async def _get_user_or_404(user_id: int, db: AsyncSession) -> User:
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


async def _get_friend_or_404(friend_id: int, db: AsyncSession) -> Friend:
    result = await db.execute(select(Friend).where(Friend.id == friend_id))
    friend = result.scalar_one_or_none()
    if friend is None:
        raise HTTPException(status_code=404, detail="Friend not found")
    return friend


def _friend_to_response(friend: Friend, today: date | None = None) -> FriendState:
    today = today or date.today()
    return FriendState(
        id=friend.id,
        user_id=friend.user_id,
        name=friend.name,
        birthday=friend.birthday,
        category=friend_service.safe_category(friend),
        description=friend.description,
        last_interaction_date=friend.last_interaction_date,
        contact=friend_service.contact_status(friend, today),
        created_at=friend.created_at,
    )


def _column_value(value):
    # Categories are stored as their plain string value
    return value.value if isinstance(value, Enum) else value


@router.post("/", response_model=FriendState, status_code=201)
async def create_friend(user_id: int, data: FriendCreate, db: AsyncSession = Depends(get_db)):
    await _get_user_or_404(user_id, db)
    friend = Friend(
        user_id=user_id,
        name=data.name,
        birthday=data.birthday,
        category=_column_value(data.category),
        last_interaction_date=data.last_interaction_date,
    )
    db.add(friend)
    await db.flush()
    await db.refresh(friend)
    return _friend_to_response(friend)


@router.get("/", response_model=list[FriendState])
async def list_friends(user_id: int, db: AsyncSession = Depends(get_db)):
    await _get_user_or_404(user_id, db)
    friends = await friend_service.list_friends(db, user_id)
    today = date.today()
    return [_friend_to_response(f, today) for f in friends]


@router.get("/{friend_id}", response_model=FriendState)
async def get_friend(friend_id: int, db: AsyncSession = Depends(get_db)):
    friend = await _get_friend_or_404(friend_id, db)
    return _friend_to_response(friend)


@router.patch("/{friend_id}", response_model=FriendState)
async def update_friend(friend_id: int, data: FriendUpdate, db: AsyncSession = Depends(get_db)):
    friend = await _get_friend_or_404(friend_id, db)

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(friend, field, _column_value(value))

    await db.flush()
    await db.refresh(friend)
    return _friend_to_response(friend)


@router.delete("/{friend_id}", status_code=204)
async def delete_friend(friend_id: int, db: AsyncSession = Depends(get_db)):
    friend = await _get_friend_or_404(friend_id, db)
    await db.execute(delete(ContactEvent).where(ContactEvent.friend_id == friend_id))
    await db.delete(friend)
    await db.flush()


@router.post("/{friend_id}/quiz", response_model=FriendState)
async def submit_friend_quiz(
    friend_id: int, data: FriendQuizSubmission, db: AsyncSession = Depends(get_db)
):
    """Categorize a friend from the answers they gave to the quiz."""
    friend = await _get_friend_or_404(friend_id, db)
    category = friend_service.apply_quiz(friend, data.answers, data.locale)
    logger.info("Friend %s categorized as %s", friend_id, category.value)
    await db.flush()
    await db.refresh(friend)
    return _friend_to_response(friend)


@router.post("/{friend_id}/contacted", response_model=FriendState)
async def mark_contacted(friend_id: int, data: ContactAck, db: AsyncSession = Depends(get_db)):
    """Acknowledge a reminder: the user got in touch with this friend."""
    friend = await _get_friend_or_404(friend_id, db)
    today = date.today()
    contacted_on = data.contacted_on or today
    if contacted_on > today:
        raise HTTPException(status_code=400, detail="Contact date cannot be in the future")

    await friend_service.record_contact(db, friend, contacted_on, data.source, data.note)
    await db.refresh(friend)
    return _friend_to_response(friend, today)
