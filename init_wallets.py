"""
Seed wallets.

Usage: python init_wallets.py SENDER=10 R1=0 R2=0
Existing addresses are left untouched.
"""
import asyncio
import sys
from decimal import Decimal

from ledger_service.core.config import get_settings
from ledger_service.core.container import ApplicationContainer
from ledger_service.core.exceptions import AccountExistsError
from ledger_service.core.money import to_minor_units
from ledger_service.infrastructure.database import init_db
from ledger_service.modules.wallets import WalletService


def parse_seed(argument: str) -> tuple[str, int]:
    address, _, balance = argument.partition("=")
    if not address or not balance:
        raise SystemExit(f"expected ADDRESS=BALANCE, got {argument!r}")
    return address, to_minor_units(Decimal(balance))


async def seed_wallets(seeds: list[tuple[str, int]]) -> None:
    container = ApplicationContainer.from_settings(get_settings())
    try:
        await init_db(container.engine)
        for address, balance_cents in seeds:
            async with container.session_factory() as session:
                service = WalletService.with_session(session)
                try:
                    await service.create_account(address, balance_cents)
                except AccountExistsError:
                    print(f"wallet {address} already exists, skipped")
                    continue
                print(f"wallet {address} created")
    finally:
        await container.dispose()


if __name__ == "__main__":
    asyncio.run(seed_wallets([parse_seed(arg) for arg in sys.argv[1:]]))
