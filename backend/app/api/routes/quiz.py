"""Quiz endpoints - questions, step-by-step answering, classification."""

import logging
from datetime import datetime

import redis.asyncio as aioredis
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.quiz_engine import QuizEngine
from app.db.database import get_db
from app.db.redis import get_redis
from app.models.user import User
from app.schemas.personality import UserProfileResult
from app.schemas.quiz import AnswerIn, QuizProgress, QuizQuestion, QuizSubmission
from app.services.catalog_service import catalog_service
from app.services.personality_service import personality_service

logger = logging.getLogger(__name__)

router = APIRouter()


async def _get_user_or_404(user_id: int, db: AsyncSession) -> User:
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def _progress(answers: list[int]) -> QuizProgress:
    total = catalog_service.quiz_length()
    is_complete = len(answers) >= total
    return QuizProgress(
        answers=answers,
        total_questions=total,
        next_question=None if is_complete else len(answers),
        is_complete=is_complete,
    )


@router.get("/questions", response_model=list[QuizQuestion])
async def get_questions(locale: str = settings.DEFAULT_LOCALE):
    """Quiz questions in the requested locale (English if unavailable)."""
    return catalog_service.quiz_questions(locale)


@router.post("/classify", response_model=UserProfileResult)
async def classify_answers(data: QuizSubmission):
    """Classify a finished answer vector without storing anything."""
    return personality_service.build_profile(data.answers, data.locale)


@router.get("/{user_id}/progress", response_model=QuizProgress)
async def get_progress(
    user_id: int,
    db: AsyncSession = Depends(get_db),
    redis: aioredis.Redis = Depends(get_redis),
):
    await _get_user_or_404(user_id, db)
    answers = await QuizEngine(redis).load_answers(user_id)
    return _progress(answers)


@router.post("/{user_id}/answer", response_model=QuizProgress)
async def answer_question(
    user_id: int,
    data: AnswerIn,
    db: AsyncSession = Depends(get_db),
    redis: aioredis.Redis = Depends(get_redis),
):
    """Record the answer to the next unanswered question."""
    await _get_user_or_404(user_id, db)
    engine = QuizEngine(redis)
    answers = await engine.load_answers(user_id)
    if len(answers) >= catalog_service.quiz_length():
        raise HTTPException(status_code=400, detail="All questions are already answered")
    answers = await engine.record_answer(user_id, data.answer)
    return _progress(answers)


@router.post("/{user_id}/back", response_model=QuizProgress)
async def go_back(
    user_id: int,
    db: AsyncSession = Depends(get_db),
    redis: aioredis.Redis = Depends(get_redis),
):
    """Undo the last answer."""
    await _get_user_or_404(user_id, db)
    answers = await QuizEngine(redis).step_back(user_id)
    return _progress(answers)


@router.post("/{user_id}/complete", response_model=UserProfileResult)
async def complete_quiz(
    user_id: int,
    locale: str | None = None,
    db: AsyncSession = Depends(get_db),
    redis: aioredis.Redis = Depends(get_redis),
):
    """Classify the saved answers, store the result on the user and end the session."""
    user = await _get_user_or_404(user_id, db)
    engine = QuizEngine(redis)
    answers = await engine.load_answers(user_id)
    if len(answers) < catalog_service.quiz_length():
        raise HTTPException(status_code=400, detail="Quiz is not finished yet")

    locale = locale or user.locale
    profile = personality_service.build_profile(answers, locale)

    user.category = profile.category.value
    user.description = profile.description
    user.personality = profile.personality.model_dump()
    user.quiz_answers = answers
    user.quiz_completed_at = datetime.now()
    await db.flush()

    await engine.clear(user_id)
    logger.info(
        "User %s completed the quiz: %s / %s",
        user_id, profile.category.value, profile.personality.personality_type,
    )
    return profile
