"""
Centralized Test Configuration.

Each test gets its own file-backed SQLite database so that concurrently
running sessions really contend for the database lock.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from ledger_service.core.config import DatabaseSettings, LoggingSettings, Settings
from ledger_service.core.container import ApplicationContainer
from ledger_service.db.models import Wallet
from ledger_service.infrastructure.database import init_db
from ledger_service.infrastructure.database.repositories import (
    SqlTransactionRepository,
    SqlWalletRepository,
)
from ledger_service.main import create_app
from ledger_service.modules.transfers import TransferService
from ledger_service.modules.wallets import WalletService

# Balances in cents: SENDER holds 10.00
SEED_WALLETS = {
    "SENDER": 1000,
    "R1": 0,
    "R2": 0,
    "R3": 0,
}


@pytest.fixture
def settings(tmp_path):
    return Settings(
        environment="test",
        database=DatabaseSettings(
            url=f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}",
            lock_timeout_ms=10000,
        ),
        logging=LoggingSettings(level="DEBUG"),
    )


@pytest.fixture
async def container(settings):
    container = ApplicationContainer.from_settings(settings)
    await init_db(container.engine)
    yield container
    await container.dispose()


@pytest.fixture
def session_factory(container):
    return container.session_factory


@pytest.fixture
async def seeded(session_factory):
    async with session_factory() as session:
        async with session.begin():
            session.add_all(
                [Wallet(address=address, balance_cents=balance) for address, balance in SEED_WALLETS.items()]
            )
    return dict(SEED_WALLETS)


@pytest.fixture
def transfer(session_factory):
    """Run one transfer on its own session, the way a request would."""

    async def _transfer(sender, receiver, amount_cents):
        async with session_factory() as session:
            return await TransferService.with_session(session).transfer(sender, receiver, amount_cents)

    return _transfer


@pytest.fixture
def create_account(session_factory):
    async def _create(address, balance_cents):
        async with session_factory() as session:
            return await WalletService.with_session(session).create_account(address, balance_cents)

    return _create


@pytest.fixture
def ledger_state(session_factory):
    """Read the whole store: ({address: balance_cents}, [(sender, receiver, amount_cents)] newest first)."""

    async def _read():
        async with session_factory() as session:
            wallets = {
                wallet.address: wallet.balance_cents
                for wallet in await SqlWalletRepository(session).list_wallets()
            }
            rows = await SqlTransactionRepository(session).list_transactions_desc()
            transactions = [(row.sender, row.receiver, row.amount_cents) for row in rows]
        return wallets, transactions

    return _read


@pytest.fixture
async def client(container):
    """Async client for testing."""
    app = create_app(container)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
