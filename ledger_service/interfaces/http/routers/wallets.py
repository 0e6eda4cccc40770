"""Wallet listing and provisioning endpoints."""

from fastapi import APIRouter, Depends, status

from ledger_service.core.money import to_minor_units
from ledger_service.interfaces.http.deps import get_wallet_service
from ledger_service.modules.wallets import WalletService
from ledger_service.schemas import (
    ErrorResponse,
    WalletCreateRequest,
    WalletListResponse,
    WalletResponse,
)

router = APIRouter()


@router.get("", response_model=WalletListResponse, summary="List wallets")
async def list_wallets(service: WalletService = Depends(get_wallet_service)) -> WalletListResponse:
    snapshots = await service.list_wallets()
    return WalletListResponse(
        total=len(snapshots),
        wallets=[WalletResponse.from_snapshot(snapshot) for snapshot in snapshots],
    )


@router.get(
    "/{address}",
    response_model=WalletResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get one wallet",
)
async def get_wallet(address: str, service: WalletService = Depends(get_wallet_service)) -> WalletResponse:
    snapshot = await service.get_wallet(address)
    return WalletResponse.from_snapshot(snapshot)


@router.post(
    "",
    response_model=WalletResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Create a wallet with an opening balance",
)
async def create_wallet(
    payload: WalletCreateRequest,
    service: WalletService = Depends(get_wallet_service),
) -> WalletResponse:
    snapshot = await service.create_account(payload.address, to_minor_units(payload.balance))
    return WalletResponse.from_snapshot(snapshot)
