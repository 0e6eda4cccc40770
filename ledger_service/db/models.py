"""SQLAlchemy ORM models."""
from sqlalchemy import BigInteger, CheckConstraint, Column, DateTime, Integer, String
from sqlalchemy.sql import func

from ledger_service.infrastructure.database.base import Base

ADDRESS_LENGTH = 255


class Wallet(Base):
    __tablename__ = "wallets"
    __table_args__ = (
        CheckConstraint("balance_cents >= 0", name="ck_wallets_balance_non_negative"),
    )

    address = Column(String(ADDRESS_LENGTH), primary_key=True)
    balance_cents = Column(BigInteger, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self) -> str:
        return f"<Wallet(address={self.address!r}, balance_cents={self.balance_cents})>"


class Transaction(Base):
    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint("amount_cents > 0", name="ck_transactions_amount_positive"),
        # ids are never reused, even after the highest row is rolled back
        {"sqlite_autoincrement": True},
    )

    transaction_id = Column(Integer, primary_key=True, autoincrement=True)
    # Plain addresses, not foreign keys: the engine checks existence under lock
    sender = Column(String(ADDRESS_LENGTH), nullable=False, index=True)
    receiver = Column(String(ADDRESS_LENGTH), nullable=False, index=True)
    amount_cents = Column(BigInteger, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self) -> str:
        return (
            f"<Transaction(id={self.transaction_id}, {self.sender!r} -> {self.receiver!r}, "
            f"amount_cents={self.amount_cents})>"
        )
