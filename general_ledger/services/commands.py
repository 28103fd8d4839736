"""
Inputs and results of the service operations.

These are plain frozen dataclasses so the services do not depend on
the HTTP schemas. The API layer converts its pydantic requests into
these commands.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from general_ledger.domain.enums import AccountType, EntryType
from general_ledger.domain.pagination import PageRequest
from general_ledger.domain.transaction import Transaction


# --- Accounts ---

@dataclass(frozen=True)
class CreateAccountCommand:
    code: str
    name: str
    account_type: AccountType
    parent_id: int | None = None


@dataclass(frozen=True)
class UpdateAccountCommand:
    """Code and type are fixed at creation and cannot be updated."""
    account_id: int
    name: str
    parent_id: int | None = None


# --- Transactions ---

@dataclass(frozen=True)
class EntryCommand:
    account_id: int
    entry_type: EntryType
    amount: Decimal
    description: str | None = None


@dataclass(frozen=True)
class CreateTransactionCommand:
    description: str
    transaction_date: date
    entries: list[EntryCommand]
    reference: str | None = None


@dataclass(frozen=True)
class UpdateTransactionCommand:
    transaction_id: int
    description: str
    transaction_date: date
    entries: list[EntryCommand]
    reference: str | None = None


@dataclass(frozen=True)
class CancelTransactionCommand:
    transaction_id: int
    cancel_reason: str


@dataclass(frozen=True)
class TransactionQuery:
    """Either date bound may be omitted; both are inclusive."""
    start_date: date | None = None
    end_date: date | None = None
    page_request: PageRequest = field(default_factory=PageRequest)


@dataclass(frozen=True)
class CancellationResult:
    original: Transaction
    reversal: Transaction
    cancel_reason: str
