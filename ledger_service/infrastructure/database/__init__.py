"""Database infrastructure helpers (engine, sessions, error classification)."""

from .base import Base
from .errors import is_lock_timeout
from .session import build_engine, build_session_factory, init_db, ping

__all__ = ["Base", "build_engine", "build_session_factory", "init_db", "is_lock_timeout", "ping"]
