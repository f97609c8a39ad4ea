"""User model - the quiz taker and owner of a friend list."""

from datetime import datetime

from sqlalchemy import String, DateTime, JSON, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.database import Base

DEFAULT_LOCALE = "en"


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), default="Friend")
    locale: Mapped[str] = mapped_column(String(10), default=DEFAULT_LOCALE)

    # Quiz result; all empty until the user finishes the quiz
    category: Mapped[str | None] = mapped_column(String(30), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    personality: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    quiz_answers: Mapped[list | None] = mapped_column(JSON, nullable=True)
    quiz_completed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now()
    )

    def reset_profile(self) -> None:
        """Forget the quiz result so the quiz can be retaken."""
        self.category = None
        self.description = None
        self.personality = None
        self.quiz_answers = None
        self.quiz_completed_at = None
