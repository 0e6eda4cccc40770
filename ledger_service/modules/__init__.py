"""Domain modules."""

from . import transfers, wallets

__all__ = [
    "transfers",
    "wallets",
]
