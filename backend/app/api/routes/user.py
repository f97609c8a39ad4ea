"""User endpoints - create and manage users and their quiz result."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.categories import InvalidCategoryError, parse_category
from app.db.database import get_db
from app.models.contact_event import ContactEvent
from app.models.friend import Friend
from app.models.user import User
from app.schemas.user import UserCreate, UserResetResponse, UserState, UserUpdate
from app.services.catalog_service import catalog_service

router = APIRouter()


async def _get_user_or_404(user_id: int, db: AsyncSession) -> User:
    """Fetch a user by ID or raise 404."""
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def _user_to_response(user: User) -> UserState:
    """Convert ORM model to response schema with computed fields."""
    category = None
    if user.category is not None:
        try:
            category = parse_category(user.category)
        except InvalidCategoryError:
            category = None

    return UserState(
        id=user.id,
        name=user.name,
        locale=user.locale,
        category=category,
        category_name=catalog_service.category_name(category, user.locale) if category else "",
        description=user.description,
        personality=user.personality,
        quiz_completed_at=user.quiz_completed_at,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


@router.post("/", response_model=UserState, status_code=201)
async def create_user(data: UserCreate, db: AsyncSession = Depends(get_db)):
    user = User(name=data.name, locale=data.locale)
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return _user_to_response(user)


@router.get("/{user_id}", response_model=UserState)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
    user = await _get_user_or_404(user_id, db)
    return _user_to_response(user)


@router.patch("/{user_id}", response_model=UserState)
async def update_user(user_id: int, data: UserUpdate, db: AsyncSession = Depends(get_db)):
    """Update profile fields (name, locale)."""
    user = await _get_user_or_404(user_id, db)

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(user, field, value)

    await db.flush()
    await db.refresh(user)
    return _user_to_response(user)


@router.delete("/{user_id}", status_code=204)
async def delete_user(user_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a user together with their friends and contact log."""
    user = await _get_user_or_404(user_id, db)
    friend_ids = select(Friend.id).where(Friend.user_id == user_id)
    await db.execute(delete(ContactEvent).where(ContactEvent.friend_id.in_(friend_ids)))
    await db.execute(delete(Friend).where(Friend.user_id == user_id))
    await db.delete(user)
    await db.flush()


@router.post("/{user_id}/reset", response_model=UserResetResponse)
async def reset_user_profile(user_id: int, db: AsyncSession = Depends(get_db)):
    """Clear the quiz result (keeps the user and their friends)."""
    user = await _get_user_or_404(user_id, db)
    user.reset_profile()
    await db.flush()
    await db.refresh(user)
    return UserResetResponse(
        message="Profile reset successfully",
        user=_user_to_response(user),
    )
