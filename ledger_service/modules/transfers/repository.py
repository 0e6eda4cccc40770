"""Repository protocol for the transaction log."""

from __future__ import annotations

from typing import Protocol, Sequence

from ledger_service.db.models import Transaction as TransactionModel


class TransactionRepository(Protocol):
    async def insert_transaction(self, sender: str, receiver: str, amount_cents: int) -> TransactionModel:
        ...

    async def list_transactions_desc(self, limit: int | None = None, offset: int = 0) -> Sequence[TransactionModel]:
        ...

    async def count_transactions(self) -> int:
        ...
