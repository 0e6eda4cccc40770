"""SQLAlchemy implementation of the append-only transaction log."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_service.db.models import Transaction


class SqlTransactionRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert_transaction(self, sender: str, receiver: str, amount_cents: int) -> Transaction:
        tx = Transaction(sender=sender, receiver=receiver, amount_cents=amount_cents)
        self.session.add(tx)
        await self.session.flush()
        await self.session.refresh(tx)
        return tx

    async def list_transactions_desc(self, limit: int | None = None, offset: int = 0) -> Sequence[Transaction]:
        stmt = select(Transaction).order_by(desc(Transaction.transaction_id)).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def count_transactions(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Transaction))
        return result.scalar_one()
