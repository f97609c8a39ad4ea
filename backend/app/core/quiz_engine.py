"""Quiz engine - keeps a user's unfinished quiz answers in Redis.

Answers are stored one at a time so the quiz can be paused, resumed, or
stepped back. The session expires after QUIZ_SESSION_TTL.
"""

import json

import redis.asyncio as aioredis

from app.config import settings


class QuizEngine:
    """Manages in-progress quiz answers (pause/resume/back) via Redis."""

    def __init__(self, redis: aioredis.Redis):
        self.redis = redis

    def _state_key(self, user_id: int) -> str:
        return f"quiz:answers:{user_id}"

    async def load_answers(self, user_id: int) -> list[int]:
        """Answers given so far, or [] if the session expired or never started."""
        raw = await self.redis.get(self._state_key(user_id))
        if raw:
            return json.loads(raw)
        return []

    async def save_answers(self, user_id: int, answers: list[int]) -> None:
        await self.redis.set(
            self._state_key(user_id), json.dumps(answers), ex=settings.QUIZ_SESSION_TTL
        )

    async def record_answer(self, user_id: int, answer: int) -> list[int]:
        answers = await self.load_answers(user_id)
        answers.append(answer)
        await self.save_answers(user_id, answers)
        return answers

    async def step_back(self, user_id: int) -> list[int]:
        """Drop the last answer so the previous question can be answered again."""
        answers = await self.load_answers(user_id)
        if answers:
            answers.pop()
            await self.save_answers(user_id, answers)
        return answers

    async def clear(self, user_id: int) -> None:
        """Forget the session (quiz completed or restarted)."""
        await self.redis.delete(self._state_key(user_id))
