"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from general_ledger.models.base import Base
from general_ledger.models.account import AccountModel
from general_ledger.models.journal_entry import JournalEntryModel
from general_ledger.models.transaction import TransactionModel

__all__ = [
    "Base",
    "AccountModel",
    "JournalEntryModel",
    "TransactionModel",
]
