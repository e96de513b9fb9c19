from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

# widest value the account store is expected to hold
MAX_DIGITS = 19
DECIMAL_PLACES = 4


class AccountCreate(BaseModel):
    id: int = Field(..., description="Identifier assigned by the system of record")
    owner_name: str = Field(..., min_length=1, description="Name of the account holder")
    balance: Decimal = Field(
        default=Decimal("0"),
        max_digits=MAX_DIGITS,
        decimal_places=DECIMAL_PLACES,
        description="Opening balance",
    )


class AccountResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_name: str
    balance: Decimal


class TransferRequest(BaseModel):
    sender_id: int
    receiver_id: int
    # scale is bounded, sign is not
    amount: Decimal = Field(..., max_digits=MAX_DIGITS, decimal_places=DECIMAL_PLACES)


class TransferResponse(BaseModel):
    sender_id: int
    receiver_id: int
    amount: Decimal
