"""
Shared enumerations for the ledger.

The same enums are used by the domain values and mapped to
database enums by the ORM models, so only valid values can be
stored.
"""

import enum


class AccountType(str, enum.Enum):
    """The five fundamental accounting categories."""
    ASSET = "ASSET"
    LIABILITY = "LIABILITY"
    EQUITY = "EQUITY"
    REVENUE = "REVENUE"
    EXPENSE = "EXPENSE"


class EntryType(str, enum.Enum):
    """Direction of a journal entry."""
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"

    def opposite(self) -> "EntryType":
        return EntryType.CREDIT if self is EntryType.DEBIT else EntryType.DEBIT


class TransactionStatus(str, enum.Enum):
    """Lifecycle of a transaction."""
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    CANCELLED = "CANCELLED"
