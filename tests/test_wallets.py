"""
Account provisioning and ledger store tests.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from ledger_service.core.exceptions import AccountExistsError, InvalidAmountError, UnknownAccountError
from ledger_service.core.money import MAX_MINOR_UNITS
from ledger_service.infrastructure.database.repositories import SqlWalletRepository
from ledger_service.modules.wallets import WalletService


class BlindWalletRepository(SqlWalletRepository):
    """Existence check that never sees the row, as if a concurrent insert landed after it."""

    async def get_wallet(self, address):
        return None


@pytest.mark.asyncio
async def test_create_account(create_account, ledger_state):
    snapshot = await create_account("ALICE", 2500)

    assert snapshot.address == "ALICE"
    assert snapshot.balance_cents == 2500
    assert snapshot.created_at is not None

    wallets, transactions = await ledger_state()
    assert wallets == {"ALICE": 2500}
    assert transactions == []


@pytest.mark.asyncio
async def test_create_account_with_zero_balance(create_account, ledger_state):
    await create_account("EMPTY", 0)

    wallets, _ = await ledger_state()
    assert wallets == {"EMPTY": 0}


@pytest.mark.asyncio
async def test_create_wallet_duplicate(create_account, ledger_state):
    await create_account("DUP", 5000)

    with pytest.raises(AccountExistsError) as excinfo:
        await create_account("DUP", 5000)

    assert "already exists" in excinfo.value.message
    wallets, _ = await ledger_state()
    assert wallets == {"DUP": 5000}


@pytest.mark.asyncio
async def test_negative_opening_balance_is_rejected(create_account, ledger_state):
    with pytest.raises(InvalidAmountError):
        await create_account("NEG", -1)

    wallets, _ = await ledger_state()
    assert wallets == {}


@pytest.mark.asyncio
async def test_unique_violation_after_check_is_account_exists(create_account, session_factory, ledger_state):
    await create_account("DUP", 100)

    async with session_factory() as session:
        service = WalletService(session, BlindWalletRepository(session))
        with pytest.raises(AccountExistsError) as excinfo:
            await service.create_account("DUP", 999)

    assert isinstance(excinfo.value.__cause__, IntegrityError)
    wallets, _ = await ledger_state()
    assert wallets == {"DUP": 100}


@pytest.mark.asyncio
async def test_get_wallet(seeded, session_factory):
    async with session_factory() as session:
        service = WalletService.with_session(session)
        snapshot = await service.get_wallet("SENDER")
        assert snapshot.balance_cents == 1000

        with pytest.raises(UnknownAccountError):
            await service.get_wallet("NOPE")


@pytest.mark.asyncio
async def test_list_wallets_is_ordered_by_address(seeded, session_factory):
    async with session_factory() as session:
        snapshots = await WalletService.with_session(session).list_wallets()

    assert [s.address for s in snapshots] == ["R1", "R2", "R3", "SENDER"]


@pytest.mark.asyncio
async def test_apply_delta_on_unknown_address(seeded, session_factory):
    async with session_factory() as session:
        async with session.begin():
            with pytest.raises(UnknownAccountError):
                await SqlWalletRepository(session).apply_delta("NOPE", 100)


@pytest.mark.asyncio
async def test_store_refuses_negative_balance(seeded, session_factory, ledger_state):
    before = await ledger_state()

    async with session_factory() as session:
        with pytest.raises(IntegrityError):
            async with session.begin():
                await SqlWalletRepository(session).apply_delta("R1", -1)

    assert await ledger_state() == before


@pytest.mark.asyncio
async def test_opening_balance_beyond_storable_maximum_is_rejected(create_account, ledger_state):
    await create_account("MAX", MAX_MINOR_UNITS)

    with pytest.raises(InvalidAmountError):
        await create_account("OVER", MAX_MINOR_UNITS + 1)

    wallets, _ = await ledger_state()
    assert wallets == {"MAX": MAX_MINOR_UNITS}
