from fastapi import APIRouter, Depends, status

from ..core.dependencies import get_transfer_service
from ..models import AccountCreate, AccountResponse, TransferRequest, TransferResponse
from ..services import TransferService


router = APIRouter(prefix="/accounts", tags=["accounts"])

@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def open_account(
    payload: AccountCreate,
    service: TransferService = Depends(get_transfer_service),
) -> AccountResponse:
    return AccountResponse.model_validate(service.open_account(payload))

@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    service: TransferService = Depends(get_transfer_service),
) -> AccountResponse:
    return AccountResponse.model_validate(service.get_account(account_id))

transfer_router = APIRouter(prefix="/transfers", tags=["transfers"])

@transfer_router.post("", response_model=TransferResponse)
def create_transfer(
    payload: TransferRequest,
    service: TransferService = Depends(get_transfer_service),
) -> TransferResponse:
    service.transfer_money(payload.sender_id, payload.receiver_id, payload.amount)
    return TransferResponse(
        sender_id=payload.sender_id,
        receiver_id=payload.receiver_id,
        amount=payload.amount,
    )

__all__ = ["router", "transfer_router"]
