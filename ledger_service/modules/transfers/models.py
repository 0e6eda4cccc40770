"""Domain models for ledger entries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True, frozen=True)
class TransactionRecord:
    transaction_id: int
    sender: str
    receiver: str
    amount_cents: int
    created_at: Optional[datetime] = None
