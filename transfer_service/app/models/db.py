from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlalchemy import Column, String
from sqlalchemy.types import TypeDecorator
from sqlmodel import Field, SQLModel


class ExactDecimal(TypeDecorator):
    """Stores a ``Decimal`` as its string form so every digit survives.

    SQLite has no native decimal type and would keep NUMERIC values as floats.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect) -> Optional[str]:
        if value is None:
            return None
        return str(Decimal(value))

    def process_result_value(self, value, dialect) -> Optional[Decimal]:
        if value is None:
            return None
        return Decimal(value)


class Account(SQLModel, table=True):
    # ids are assigned by the system of record, never generated here
    id: int = Field(primary_key=True, sa_column_kwargs={"autoincrement": False})
    owner_name: str
    balance: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(ExactDecimal(64), nullable=False),
    )
