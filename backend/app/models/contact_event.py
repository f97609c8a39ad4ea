"""Contact event model - log of acknowledged reminders and manual check-ins."""

from datetime import date, datetime

from sqlalchemy import String, Date, DateTime, ForeignKey, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.database import Base


class ContactEvent(Base):
    __tablename__ = "contact_events"

    id: Mapped[int] = mapped_column(primary_key=True)
    friend_id: Mapped[int] = mapped_column(ForeignKey("friends.id"), index=True)
    contacted_on: Mapped[date] = mapped_column(Date)
    source: Mapped[str] = mapped_column(String(50))  # "reminder" or "manual"
    note: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
