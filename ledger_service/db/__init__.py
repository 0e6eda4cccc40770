"""ORM models for the ledger store."""

from .models import Transaction, Wallet

__all__ = ["Transaction", "Wallet"]
