"""Ledger service dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_service.modules.transfers import TransferService
from ledger_service.modules.wallets import WalletService

from .database import get_db_session


def get_wallet_service(db: AsyncSession = Depends(get_db_session)) -> WalletService:
    return WalletService.with_session(db)


def get_transfer_service(db: AsyncSession = Depends(get_db_session)) -> TransferService:
    return TransferService.with_session(db)


__all__ = [
    "get_transfer_service",
    "get_wallet_service",
]
