"""Database models package."""

from app.models.user import User
from app.models.friend import Friend
from app.models.contact_event import ContactEvent

__all__ = ["User", "Friend", "ContactEvent"]
