"""Development server implementing the guild calendar API in memory."""

from .config import ServerSettings, load_settings
from .security import generate_token, verify_password
from .store import CalendarStore, InMemoryCalendarStore

__all__ = [
    "CalendarStore",
    "generate_token",
    "InMemoryCalendarStore",
    "load_settings",
    "ServerSettings",
    "verify_password",
]
