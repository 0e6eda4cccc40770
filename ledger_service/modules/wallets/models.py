"""Domain models for wallet operations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class WalletSnapshot:
    address: str
    balance_cents: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
