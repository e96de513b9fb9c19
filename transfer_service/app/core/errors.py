from __future__ import annotations


class BankingError(Exception):
    """Base class for errors raised by the transfer core."""


class AccountNotFoundError(BankingError):
    """Raised when an account id does not resolve in the store."""

    def __init__(self, message: str, account_id: int) -> None:
        super().__init__(message)
        self.account_id = account_id


class DuplicateAccountError(BankingError):
    """Raised when registering an account id that already exists."""
