"""
Ledger error taxonomy.

Every rejection carries a stable ``error_code`` and the HTTP status the
transport adapter answers with. Storage errors are not wrapped here; they
reach the caller as the original SQLAlchemy exception.
"""

from __future__ import annotations

from typing import Any, Dict


class LedgerError(Exception):
    """Base class for ledger domain errors."""

    error_code = "ledger_error"
    status_code = 400

    def __init__(self, message: str, details: Dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidAmountError(LedgerError):
    """Raised for non-positive transfer amounts and negative opening balances."""

    error_code = "invalid_amount"
    status_code = 400


class SelfTransferError(LedgerError):
    error_code = "self_transfer"
    status_code = 400

    def __init__(self, address: str) -> None:
        super().__init__(
            f"sender and receiver must differ: {address}",
            details={"address": address},
        )


class UnknownAccountError(LedgerError):
    """Raised when a wallet address is not in the store."""

    error_code = "unknown_account"
    status_code = 404

    def __init__(self, address: str, role: str | None = None) -> None:
        self.address = address
        self.role = role
        label = f"{role} wallet" if role else "wallet"
        super().__init__(
            f"{label} {address!r} not in database",
            details={"address": address, "role": role},
        )


class InsufficientFundsError(LedgerError):
    error_code = "insufficient_funds"
    status_code = 402

    def __init__(self, address: str, balance_cents: int, amount_cents: int) -> None:
        self.address = address
        super().__init__(
            "insufficient amount",
            details={
                "address": address,
                "balance_cents": balance_cents,
                "amount_cents": amount_cents,
            },
        )


class AccountExistsError(LedgerError):
    """Raised when attempting to create a wallet with a duplicate address."""

    error_code = "account_exists"
    status_code = 409

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"wallet {address!r} already exists", details={"address": address})


class LedgerBusyError(LedgerError):
    """Raised when a wallet lock could not be acquired within the lock timeout."""

    error_code = "ledger_busy"
    status_code = 503
