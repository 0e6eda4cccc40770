"""Wallet domain exports"""

from .models import WalletSnapshot
from .service import WalletService

__all__ = [
    "WalletSnapshot",
    "WalletService",
]
