from datetime import timedelta

from .config import settings, get_settings
from .security import (
    generate_session_token,
    verify_password,
    get_password_hash
)
from .sessions import Session, SessionStore, Unauthorized

# Instância global (vida útil = vida do processo)
session_store = SessionStore(ttl=timedelta(hours=settings.SESSION_TTL_HOURS))

__all__ = [
    "settings",
    "get_settings",
    "generate_session_token",
    "verify_password",
    "get_password_hash",
    "Session",
    "SessionStore",
    "Unauthorized",
    "session_store"
]
