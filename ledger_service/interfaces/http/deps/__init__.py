"""Reusable FastAPI dependencies."""

from .database import get_db_session
from .ledger import get_transfer_service, get_wallet_service

__all__ = [
    "get_db_session",
    "get_transfer_service",
    "get_wallet_service",
]
