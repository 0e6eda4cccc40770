"""Transfer endpoints."""

from fastapi import APIRouter, Depends, Query, status

from ledger_service.core.money import to_minor_units
from ledger_service.interfaces.http.deps import get_transfer_service
from ledger_service.modules.transfers import TransferService
from ledger_service.schemas import (
    ErrorResponse,
    TransactionListResponse,
    TransactionResponse,
    TransferRequest,
)

router = APIRouter()


@router.get("", response_model=TransactionListResponse, summary="List transactions, newest first")
async def list_transactions(
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    service: TransferService = Depends(get_transfer_service),
) -> TransactionListResponse:
    total = await service.count_transactions()
    records = await service.list_transactions(limit, offset)
    return TransactionListResponse(
        total=total,
        transactions=[TransactionResponse.from_record(record) for record in records],
    )


@router.post(
    "",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        402: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
    summary="Transfer funds between two wallets",
)
async def make_transaction(
    payload: TransferRequest,
    service: TransferService = Depends(get_transfer_service),
) -> TransactionResponse:
    record = await service.transfer(payload.sender, payload.receiver, to_minor_units(payload.amount))
    return TransactionResponse.from_record(record)
