"""Store ports and their SQLAlchemy implementations."""

from general_ledger.repositories.ports import AccountStore, TransactionStore
from general_ledger.repositories.account_repository import AccountRepository
from general_ledger.repositories.transaction_repository import TransactionRepository

__all__ = [
    "AccountStore",
    "TransactionStore",
    "AccountRepository",
    "TransactionRepository",
]
