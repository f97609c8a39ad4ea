"""Quiz-related Pydantic schemas."""

from typing import Annotated

from pydantic import BaseModel, Field

# One quiz answer: index of the chosen option on the 0-3 scale
Answer = Annotated[int, Field(ge=0, le=3)]


class QuizQuestion(BaseModel):
    id: int
    text: str
    options: list[str]


class QuizSubmission(BaseModel):
    """A finished answer vector, classified without touching any stored state."""
    answers: list[Answer]
    locale: str = Field(default="en", min_length=2, max_length=10)


class AnswerIn(BaseModel):
    answer: Answer


class QuizProgress(BaseModel):
    answers: list[int]
    total_questions: int
    next_question: int | None  # 0-based index, None once every question is answered
    is_complete: bool
