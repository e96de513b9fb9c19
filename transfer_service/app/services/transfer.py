from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from sqlmodel import Session

from ..core.errors import AccountNotFoundError
from ..models import AccountCreate, AccountModel
from .repository import AccountRepository


logger = logging.getLogger(__name__)


class TransferService:
    """Moves money between two accounts held in an :class:`AccountRepository`.

    ``session`` is the optional transaction boundary. When given it is
    committed once both balances are written; otherwise the caller owns
    whatever transactional behaviour the repository has.
    """

    def __init__(
        self,
        repository: AccountRepository,
        session: Optional[Session] = None,
    ) -> None:
        self.repository = repository
        self.session = session

    def _commit(self) -> None:
        if self.session is not None:
            self.session.commit()

    def get_account(self, account_id: int) -> AccountModel:
        account = self.repository.get_account(account_id)
        if account is None:
            raise AccountNotFoundError(
                f"Account not found with id: {account_id}", account_id=account_id
            )
        return account

    def open_account(self, payload: AccountCreate) -> AccountModel:
        account = self.repository.add_account(
            payload.id, payload.owner_name, payload.balance
        )
        self._commit()
        logger.info(
            "account.created",
            extra={"account_id": account.id, "owner_name": account.owner_name},
        )
        return account

    def transfer_money(
        self,
        sender_id: int,
        receiver_id: int,
        amount: Decimal,
    ) -> None:
        """Debit ``sender_id`` and credit ``receiver_id`` by ``amount``.

        Both accounts are resolved before anything is written, so a missing
        account leaves every balance untouched. There is no balance floor and
        no self-transfer check. The two writes are not undone if the second
        one fails.

        Raises:
            AccountNotFoundError: if either id does not resolve.
        """
        sender = self.repository.get_account(sender_id)
        if sender is None:
            logger.warning("transfer.sender_missing", extra={"sender_id": sender_id})
            raise AccountNotFoundError(
                f"Sender account not found with id: {sender_id}",
                account_id=sender_id,
            )

        receiver = self.repository.get_account(receiver_id)
        if receiver is None:
            logger.warning(
                "transfer.receiver_missing", extra={"receiver_id": receiver_id}
            )
            raise AccountNotFoundError(
                f"Receiver account not found with id: {receiver_id}",
                account_id=receiver_id,
            )

        sender_new_balance = sender.balance - amount
        receiver_new_balance = receiver.balance + amount

        self.repository.update_balance(sender_id, sender_new_balance)
        self.repository.update_balance(receiver_id, receiver_new_balance)
        self._commit()

        logger.info(
            "account.transfer",
            extra={
                "sender_id": sender_id,
                "receiver_id": receiver_id,
                "amount": str(amount),
            },
        )
