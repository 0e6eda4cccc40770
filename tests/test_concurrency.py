"""
Concurrency Tests.

Validates that contending transfers neither lose updates nor overdraw a wallet.
"""

import asyncio

import pytest

from ledger_service.core.exceptions import AccountExistsError, InsufficientFundsError
from ledger_service.modules.transfers import TransactionRecord


def _split(results):
    succeeded = [r for r in results if isinstance(r, TransactionRecord)]
    failed = [r for r in results if not isinstance(r, TransactionRecord)]
    return succeeded, failed


@pytest.mark.asyncio
async def test_concurrent_transfers_from_one_sender(seeded, transfer, ledger_state):
    """Amounts sum past the balance; only a consistent subset may succeed."""
    amounts = [100, 400, 700]

    results = await asyncio.gather(
        *(transfer("SENDER", "R1", amount) for amount in amounts),
        return_exceptions=True,
    )

    succeeded, failed = _split(results)
    assert failed, "1.00 + 4.00 + 7.00 exceeds 10.00, something must fail"
    assert all(isinstance(error, InsufficientFundsError) for error in failed)

    moved = sum(record.amount_cents for record in succeeded)
    wallets, transactions = await ledger_state()
    assert wallets["SENDER"] == 1000 - moved
    assert 0 <= wallets["SENDER"] <= 1000
    assert wallets["R1"] == moved
    assert len(transactions) == len(succeeded)


@pytest.mark.asyncio
async def test_many_concurrent_transfers_drain_exactly(seeded, transfer, ledger_state):
    receivers = ["R1", "R2", "R3"]

    results = await asyncio.gather(
        *(transfer("SENDER", receivers[i % 3], 100) for i in range(20)),
        return_exceptions=True,
    )

    succeeded, failed = _split(results)
    assert len(succeeded) == 10
    assert len(failed) == 10
    assert all(isinstance(error, InsufficientFundsError) for error in failed)

    wallets, transactions = await ledger_state()
    assert wallets["SENDER"] == 0
    assert sum(wallets.values()) == 1000
    assert len(transactions) == 10
    assert len({record.transaction_id for record in succeeded}) == 10


@pytest.mark.asyncio
async def test_opposite_direction_transfers_do_not_deadlock(create_account, transfer, ledger_state):
    await create_account("A", 500)
    await create_account("B", 500)

    calls = []
    for _ in range(10):
        calls.append(transfer("A", "B", 10))
        calls.append(transfer("B", "A", 10))

    results = await asyncio.wait_for(asyncio.gather(*calls, return_exceptions=True), timeout=60)

    succeeded, failed = _split(results)
    assert failed == []
    assert len(succeeded) == 20

    wallets, transactions = await ledger_state()
    assert wallets == {"A": 500, "B": 500}
    assert len(transactions) == 20


@pytest.mark.asyncio
async def test_concurrent_creation_of_one_address(create_account, ledger_state):
    results = await asyncio.gather(
        *(create_account("RACE", 100) for _ in range(5)),
        return_exceptions=True,
    )

    errors = [r for r in results if isinstance(r, BaseException)]
    assert len(results) - len(errors) == 1
    assert all(isinstance(error, AccountExistsError) for error in errors)

    wallets, _ = await ledger_state()
    assert wallets == {"RACE": 100}
