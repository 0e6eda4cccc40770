from fastapi import APIRouter

from ledger_service.interfaces.http.routers import transactions, wallets


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(wallets.router, prefix="/wallets", tags=["wallets"])
    router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
    return router


__all__ = [
    "create_api_router",
]
