from .repository import AccountRepository, SqlAccountRepository
from .transfer import TransferService

__all__ = ["AccountRepository", "SqlAccountRepository", "TransferService"]
