from .db import Account as AccountModel
from .schemas import (
    AccountCreate,
    AccountResponse,
    TransferRequest,
    TransferResponse,
)

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "TransferRequest",
    "TransferResponse",
    "AccountModel",
]
