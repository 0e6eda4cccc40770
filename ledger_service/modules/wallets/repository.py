"""Repository protocol for wallet persistence."""

from __future__ import annotations

from typing import Protocol, Sequence

from ledger_service.db.models import Wallet as WalletModel


class WalletRepository(Protocol):
    async def get_wallet(self, address: str) -> WalletModel | None:
        ...

    async def get_wallet_for_update(self, address: str) -> WalletModel | None:
        """Read the row and hold an exclusive lock on it until the transaction ends."""
        ...

    async def apply_delta(self, address: str, delta_cents: int) -> int:
        """Adjust the balance by ``delta_cents`` and return the new balance."""
        ...

    async def create_wallet(self, address: str, balance_cents: int) -> WalletModel:
        ...

    async def list_wallets(self) -> Sequence[WalletModel]:
        ...
