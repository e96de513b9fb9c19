from fastapi import Depends
from sqlmodel import Session

from ..services import AccountRepository, SqlAccountRepository, TransferService
from .db import get_session


def get_account_repository(session: Session = Depends(get_session)) -> AccountRepository:
    return SqlAccountRepository(session)


def get_transfer_service(
    session: Session = Depends(get_session),
    repository: AccountRepository = Depends(get_account_repository),
) -> TransferService:
    return TransferService(repository, session)
