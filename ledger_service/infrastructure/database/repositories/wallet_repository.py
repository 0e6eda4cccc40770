"""SQLAlchemy implementation of the wallet repository."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_service.core.exceptions import AccountExistsError, UnknownAccountError
from ledger_service.db.models import Wallet


class SqlWalletRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_wallet(self, address: str) -> Wallet | None:
        stmt = select(Wallet).where(Wallet.address == address)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_wallet_for_update(self, address: str) -> Wallet | None:
        stmt = (
            select(Wallet)
            .where(Wallet.address == address)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def apply_delta(self, address: str, delta_cents: int) -> int:
        stmt = (
            update(Wallet)
            .where(Wallet.address == address)
            .values(balance_cents=Wallet.balance_cents + delta_cents)
            .returning(Wallet.balance_cents)
        )
        result = await self.session.execute(stmt)
        balance = result.scalar_one_or_none()
        if balance is None:
            raise UnknownAccountError(address)
        return balance

    async def create_wallet(self, address: str, balance_cents: int) -> Wallet:
        wallet = Wallet(address=address, balance_cents=balance_cents)
        self.session.add(wallet)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise AccountExistsError(address) from exc
        await self.session.refresh(wallet)
        return wallet

    async def list_wallets(self) -> Sequence[Wallet]:
        stmt = select(Wallet).order_by(Wallet.address)
        result = await self.session.execute(stmt)
        return result.scalars().all()
