"""Client-side session and synchronization layer for the guild calendar."""

from .cache import CollectionCache
from .config import ClientSettings, ConfigurationError, load_settings
from .credentials import CredentialStore, FileCredentialStore, InMemoryCredentialStore, create_credential_store
from .gateway import ApiGateway
from .models import Dungeon, Event, EventDraft, EventType, Session, Signup
from .mutations import MutationOrchestrator
from .service import CalendarService
from .session import SessionController, SessionState

__all__ = [
    "ApiGateway",
    "CalendarService",
    "ClientSettings",
    "CollectionCache",
    "ConfigurationError",
    "create_credential_store",
    "CredentialStore",
    "Dungeon",
    "Event",
    "EventDraft",
    "EventType",
    "FileCredentialStore",
    "InMemoryCredentialStore",
    "load_settings",
    "MutationOrchestrator",
    "Session",
    "SessionController",
    "SessionState",
    "Signup",
]
