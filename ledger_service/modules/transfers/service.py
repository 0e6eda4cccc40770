"""Transfer engine: the only code path that moves money between wallets."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_service.core.exceptions import (
    InsufficientFundsError,
    InvalidAmountError,
    LedgerBusyError,
    LedgerError,
    SelfTransferError,
    UnknownAccountError,
)
from ledger_service.core.money import MAX_MINOR_UNITS
from ledger_service.db.models import Transaction as TransactionModel
from ledger_service.infrastructure.database.errors import is_lock_timeout
from ledger_service.infrastructure.database.repositories import (
    SqlTransactionRepository,
    SqlWalletRepository,
)
from ledger_service.modules.wallets.repository import WalletRepository

from .models import TransactionRecord
from .repository import TransactionRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TransferService:
    session: AsyncSession
    wallets: WalletRepository
    transactions: TransactionRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "TransferService":
        return cls(session, SqlWalletRepository(session), SqlTransactionRepository(session))

    async def transfer(self, sender: str, receiver: str, amount_cents: int) -> TransactionRecord:
        """
        Move ``amount_cents`` from ``sender`` to ``receiver`` and log it.

        Flow (one store transaction, rolled back on any error):
        1. Lock both wallet rows in ascending address order
        2. Reject unknown sender, then unknown receiver
        3. Reject when the sender balance is below the amount
        4. Debit sender, credit receiver
        5. Append the ledger entry

        Raises:
            InvalidAmountError: amount is not positive or not storable (no storage access)
            SelfTransferError: sender and receiver are the same address (no storage access)
            UnknownAccountError: either wallet does not exist
            InsufficientFundsError: sender balance below amount at lock time
            InvalidAmountError: the credit would push the receiver past the storable maximum
            LedgerBusyError: a row lock was not granted within the lock timeout
        """
        if amount_cents <= 0:
            raise InvalidAmountError("amount must be positive", details={"amount_cents": amount_cents})
        if amount_cents > MAX_MINOR_UNITS:
            raise InvalidAmountError(
                "amount exceeds the largest storable value",
                details={"amount_cents": amount_cents, "max_minor_units": MAX_MINOR_UNITS},
            )
        if sender == receiver:
            raise SelfTransferError(sender)

        try:
            async with self.session.begin():
                entry = await self._move(sender, receiver, amount_cents)
                record = self._to_record(entry)
        except LedgerError as exc:
            logger.warning(
                "Transfer rejected sender=%s receiver=%s amount_cents=%s reason=%s",
                sender,
                receiver,
                amount_cents,
                exc.error_code,
            )
            raise
        except DBAPIError as exc:
            if is_lock_timeout(exc):
                logger.warning(
                    "Transfer timed out waiting for wallet lock sender=%s receiver=%s",
                    sender,
                    receiver,
                )
                raise LedgerBusyError(
                    "wallet is locked by another transfer, retry later",
                    details={"sender": sender, "receiver": receiver},
                ) from exc
            raise

        logger.info(
            "Transfer committed id=%s sender=%s receiver=%s amount_cents=%s",
            record.transaction_id,
            sender,
            receiver,
            amount_cents,
        )
        return record

    async def _move(self, sender: str, receiver: str, amount_cents: int) -> TransactionModel:
        # Fixed global lock order: transfer(A, B) and transfer(B, A) cannot deadlock
        locked = {}
        for address in sorted((sender, receiver)):
            locked[address] = await self.wallets.get_wallet_for_update(address)

        sender_wallet = locked[sender]
        receiver_wallet = locked[receiver]
        if sender_wallet is None:
            raise UnknownAccountError(sender, role="sender")
        if receiver_wallet is None:
            raise UnknownAccountError(receiver, role="receiver")

        if sender_wallet.balance_cents < amount_cents:
            raise InsufficientFundsError(sender, sender_wallet.balance_cents, amount_cents)
        if receiver_wallet.balance_cents > MAX_MINOR_UNITS - amount_cents:
            raise InvalidAmountError(
                "credit would overflow the receiver balance",
                details={"receiver": receiver, "amount_cents": amount_cents},
            )

        await self.wallets.apply_delta(sender, -amount_cents)
        await self.wallets.apply_delta(receiver, amount_cents)
        return await self.transactions.insert_transaction(sender, receiver, amount_cents)

    async def list_transactions(self, limit: int | None = None, offset: int = 0) -> list[TransactionRecord]:
        rows = await self.transactions.list_transactions_desc(limit, offset)
        return [self._to_record(row) for row in rows]

    async def count_transactions(self) -> int:
        return await self.transactions.count_transactions()

    @staticmethod
    def _to_record(model: TransactionModel) -> TransactionRecord:
        return TransactionRecord(
            transaction_id=model.transaction_id,
            sender=model.sender,
            receiver=model.receiver,
            amount_cents=model.amount_cents,
            created_at=model.created_at,
        )
