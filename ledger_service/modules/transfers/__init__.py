"""Transfer engine exports"""

from .models import TransactionRecord
from .service import TransferService

__all__ = [
    "TransactionRecord",
    "TransferService",
]
