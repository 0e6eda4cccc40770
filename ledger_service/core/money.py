"""Conversion between transport decimals and stored minor units."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ledger_service.core.exceptions import InvalidAmountError

MINOR_UNIT_DIGITS = 2
# Balances and amounts are stored as signed 64-bit integers
MAX_MINOR_UNITS = 2**63 - 1
_QUANTUM = Decimal(1).scaleb(-MINOR_UNIT_DIGITS)


def to_minor_units(amount: Decimal) -> int:
    """Convert ``Decimal("12.34")`` to ``1234``; finer precision is rejected, never rounded."""
    try:
        quantized = amount.quantize(_QUANTUM)
    except InvalidOperation as exc:
        raise InvalidAmountError(
            f"amount {amount} is not a finite number in the supported range",
            details={"amount": str(amount)},
        ) from exc
    if quantized != amount:
        raise InvalidAmountError(
            f"amount {amount} has more than {MINOR_UNIT_DIGITS} decimal places",
            details={"amount": str(amount)},
        )
    minor = int(quantized.scaleb(MINOR_UNIT_DIGITS))
    if abs(minor) > MAX_MINOR_UNITS:
        raise InvalidAmountError(
            f"amount {amount} exceeds the largest storable value",
            details={"amount": str(amount), "max_minor_units": MAX_MINOR_UNITS},
        )
    return minor


def from_minor_units(value: int) -> Decimal:
    return Decimal(value).scaleb(-MINOR_UNIT_DIGITS)
