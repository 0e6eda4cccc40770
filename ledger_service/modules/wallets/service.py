"""Wallet domain service: account provisioning and balance queries."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from ledger_service.core.exceptions import AccountExistsError, InvalidAmountError, UnknownAccountError
from ledger_service.core.money import MAX_MINOR_UNITS
from ledger_service.db.models import Wallet as WalletModel
from ledger_service.infrastructure.database.repositories.wallet_repository import SqlWalletRepository

from .models import WalletSnapshot
from .repository import WalletRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class WalletService:
    session: AsyncSession
    repository: WalletRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "WalletService":
        return cls(session, SqlWalletRepository(session))

    async def create_account(self, address: str, balance_cents: int) -> WalletSnapshot:
        """Create a wallet with an opening balance in its own transaction.

        Duplicates are caught twice: by the existence check, and by the
        primary key when a concurrent creation wins the race after the check.
        """
        if balance_cents < 0:
            raise InvalidAmountError(
                "initial balance must not be negative",
                details={"balance_cents": balance_cents},
            )
        if balance_cents > MAX_MINOR_UNITS:
            raise InvalidAmountError(
                "initial balance exceeds the largest storable value",
                details={"balance_cents": balance_cents, "max_minor_units": MAX_MINOR_UNITS},
            )

        try:
            async with self.session.begin():
                existing = await self.repository.get_wallet(address)
                if existing is not None:
                    raise AccountExistsError(address)
                wallet = await self.repository.create_wallet(address, balance_cents)
                snapshot = self._to_snapshot(wallet)
        except AccountExistsError:
            logger.warning("Wallet creation rejected, address already exists: %s", address)
            raise

        logger.info("Wallet created address=%s balance_cents=%s", address, balance_cents)
        return snapshot

    async def get_wallet(self, address: str) -> WalletSnapshot:
        wallet = await self.repository.get_wallet(address)
        if wallet is None:
            raise UnknownAccountError(address)
        return self._to_snapshot(wallet)

    async def list_wallets(self) -> list[WalletSnapshot]:
        rows = await self.repository.list_wallets()
        return [self._to_snapshot(row) for row in rows]

    @staticmethod
    def _to_snapshot(model: WalletModel) -> WalletSnapshot:
        return WalletSnapshot(
            address=model.address,
            balance_cents=model.balance_cents,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
