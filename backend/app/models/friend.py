"""Friend model - one tracked friendship of a user."""

from datetime import date, datetime

from sqlalchemy import String, Date, DateTime, ForeignKey, JSON, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.database import Base


class Friend(Base):
    __tablename__ = "friends"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    name: Mapped[str] = mapped_column(String(100))
    birthday: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Stored as plain text; may hold a value that is no longer a valid category
    category: Mapped[str | None] = mapped_column(String(30), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    quiz_answers: Mapped[list | None] = mapped_column(JSON, nullable=True)

    # The only field the scoring engine writes back (when a reminder is acted on)
    last_interaction_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
