from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from sqlmodel import Session

from ..core.errors import AccountNotFoundError, DuplicateAccountError
from ..models import AccountModel


class AccountRepository(ABC):
    """Lookup and balance-overwrite surface the transfer core depends on."""

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[AccountModel]:
        """Return the account with ``account_id`` or ``None``."""

    @abstractmethod
    def update_balance(self, account_id: int, new_balance: Decimal) -> None:
        """Unconditionally overwrite the stored balance of ``account_id``."""

    @abstractmethod
    def add_account(
        self, account_id: int, owner_name: str, balance: Decimal
    ) -> AccountModel:
        """Register an account created by the system of record."""


class SqlAccountRepository(AccountRepository):
    """Thin data access layer around the SQLModel session.

    Writes are flushed but never committed; the session owner decides.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_account(self, account_id: int) -> Optional[AccountModel]:
        return self.session.get(AccountModel, account_id)

    def update_balance(self, account_id: int, new_balance: Decimal) -> None:
        account = self.session.get(AccountModel, account_id)
        if account is None:
            raise AccountNotFoundError(
                f"Account not found with id: {account_id}", account_id=account_id
            )
        account.balance = new_balance
        self.session.add(account)
        self.session.flush()

    def add_account(
        self, account_id: int, owner_name: str, balance: Decimal
    ) -> AccountModel:
        if self.session.get(AccountModel, account_id) is not None:
            raise DuplicateAccountError(f"Account {account_id} already exists")
        account = AccountModel(id=account_id, owner_name=owner_name, balance=balance)
        self.session.add(account)
        self.session.flush()
        self.session.refresh(account)
        return account
