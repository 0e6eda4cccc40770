"""Pydantic schemas used across the project."""
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field

from ledger_service.core.money import from_minor_units
from ledger_service.db.models import ADDRESS_LENGTH
from ledger_service.modules.transfers import TransactionRecord
from ledger_service.modules.wallets import WalletSnapshot


class WalletCreateRequest(BaseModel):
    address: str = Field(..., min_length=1, max_length=ADDRESS_LENGTH)
    balance: Decimal = Field(..., allow_inf_nan=False)


class WalletResponse(BaseModel):
    address: str
    balance: Decimal
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_snapshot(cls, snapshot: WalletSnapshot) -> "WalletResponse":
        return cls(
            address=snapshot.address,
            balance=from_minor_units(snapshot.balance_cents),
            created_at=snapshot.created_at,
            updated_at=snapshot.updated_at,
        )


class WalletListResponse(BaseModel):
    total: int
    wallets: list[WalletResponse]


class TransferRequest(BaseModel):
    sender: str = Field(..., min_length=1, max_length=ADDRESS_LENGTH)
    receiver: str = Field(..., min_length=1, max_length=ADDRESS_LENGTH)
    amount: Decimal = Field(..., allow_inf_nan=False)


class TransactionResponse(BaseModel):
    transaction_id: int
    sender: str
    receiver: str
    amount: Decimal
    created_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, record: TransactionRecord) -> "TransactionResponse":
        return cls(
            transaction_id=record.transaction_id,
            sender=record.sender,
            receiver=record.receiver,
            amount=from_minor_units(record.amount_cents),
            created_at=record.created_at,
        )


class TransactionListResponse(BaseModel):
    total: int
    transactions: list[TransactionResponse]


class ErrorResponse(BaseModel):
    error_code: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    status: str
    app_name: str
    version: str
    database: str
