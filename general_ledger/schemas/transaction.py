"""
Pydantic schemas for transaction operations.

Structural checks (entry count, positive amounts, text lengths) are
rejected here, before the request reaches the service. The domain
repeats them, so the service is safe to call without these schemas.
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from general_ledger.domain.enums import EntryType, TransactionStatus
from general_ledger.domain.pagination import Page
from general_ledger.domain.transaction import (
    AMOUNT_MAX_DECIMAL_PLACES,
    DESCRIPTION_MAX_LENGTH,
    ENTRY_DESCRIPTION_MAX_LENGTH,
    MIN_ENTRIES,
    REFERENCE_MAX_LENGTH,
)
from general_ledger.services.commands import (
    CancelTransactionCommand,
    CancellationResult,
    CreateTransactionCommand,
    EntryCommand,
    UpdateTransactionCommand,
)


# --- Request Schemas ---

class JournalEntryCreate(BaseModel):
    """A single debit or credit line."""
    account_id: int
    entry_type: EntryType
    amount: Decimal = Field(gt=0, decimal_places=AMOUNT_MAX_DECIMAL_PLACES)
    description: str | None = Field(
        default=None, max_length=ENTRY_DESCRIPTION_MAX_LENGTH
    )

    def to_command(self) -> EntryCommand:
        return EntryCommand(
            account_id=self.account_id,
            entry_type=self.entry_type,
            amount=self.amount,
            description=self.description,
        )


class TransactionCreate(BaseModel):
    """
    A complete transaction: a group of entries that must balance.

    Whether debits equal credits is checked by the ledger, which
    reports both totals when they differ.
    """
    description: str = Field(min_length=1, max_length=DESCRIPTION_MAX_LENGTH)
    transaction_date: date
    reference: str | None = Field(default=None, max_length=REFERENCE_MAX_LENGTH)
    entries: list[JournalEntryCreate] = Field(min_length=MIN_ENTRIES)

    def to_command(self) -> CreateTransactionCommand:
        return CreateTransactionCommand(
            description=self.description,
            transaction_date=self.transaction_date,
            reference=self.reference,
            entries=[e.to_command() for e in self.entries],
        )


class TransactionUpdate(TransactionCreate):
    """Full replacement of a PENDING transaction."""

    def to_command(self, transaction_id: int) -> UpdateTransactionCommand:
        return UpdateTransactionCommand(
            transaction_id=transaction_id,
            description=self.description,
            transaction_date=self.transaction_date,
            reference=self.reference,
            entries=[e.to_command() for e in self.entries],
        )


class TransactionCancel(BaseModel):
    cancel_reason: str = Field(min_length=1, max_length=DESCRIPTION_MAX_LENGTH)

    def to_command(self, transaction_id: int) -> CancelTransactionCommand:
        return CancelTransactionCommand(
            transaction_id=transaction_id,
            cancel_reason=self.cancel_reason,
        )


# --- Response Schemas ---

class JournalEntryResponse(BaseModel):
    account_id: int
    account_code: str
    account_name: str
    entry_type: EntryType
    amount: Decimal
    description: str | None

    model_config = {"from_attributes": True}


class TransactionResponse(BaseModel):
    id: int
    description: str
    transaction_date: date
    reference: str | None
    status: TransactionStatus
    total_amount: Decimal
    entries: list[JournalEntryResponse]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CancelTransactionResponse(BaseModel):
    original_transaction: TransactionResponse
    reversal_transaction: TransactionResponse
    cancel_reason: str

    @classmethod
    def from_result(cls, result: CancellationResult) -> "CancelTransactionResponse":
        return cls(
            original_transaction=TransactionResponse.model_validate(result.original),
            reversal_transaction=TransactionResponse.model_validate(result.reversal),
            cancel_reason=result.cancel_reason,
        )


class TransactionPageResponse(BaseModel):
    content: list[TransactionResponse]
    total_elements: int
    total_pages: int
    size: int
    number: int
    first: bool
    last: bool

    @classmethod
    def from_page(cls, page: Page) -> "TransactionPageResponse":
        return cls(
            content=[TransactionResponse.model_validate(t) for t in page.items],
            total_elements=page.total,
            total_pages=page.total_pages,
            size=page.size,
            number=page.page,
            first=page.is_first,
            last=page.is_last,
        )
