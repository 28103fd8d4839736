"""Ledger domain values: accounts, transactions, journal entries."""

from general_ledger.domain.enums import AccountType, EntryType, TransactionStatus
from general_ledger.domain.account import Account
from general_ledger.domain.transaction import JournalEntry, Transaction
from general_ledger.domain.pagination import Page, PageRequest

__all__ = [
    "AccountType",
    "EntryType",
    "TransactionStatus",
    "Account",
    "JournalEntry",
    "Transaction",
    "Page",
    "PageRequest",
]
