import pytest

from ...core.errors import AccountNotFoundError, BankingError


def test_account_not_found_carries_id() -> None:
    exc = AccountNotFoundError("Sender account not found with id: 7", account_id=7)

    assert isinstance(exc, BankingError)
    assert exc.account_id == 7
    assert str(exc) == "Sender account not found with id: 7"


def test_account_not_found_requires_id() -> None:
    with pytest.raises(TypeError):
        AccountNotFoundError("Sender account not found")
