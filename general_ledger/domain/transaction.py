"""
Transaction and journal entry values.

A transaction groups journal entries that must balance: the sum of
DEBIT amounts equals the sum of CREDIT amounts, compared exactly
with Decimal arithmetic. The check runs every time a Transaction is
constructed, and every change (revise, approve, cancel) constructs
a new Transaction, so no unbalanced value can exist.

Journal entries belong to their transaction. They have no identity
of their own and are replaced wholesale when the transaction is
revised.
"""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from decimal import Decimal

from general_ledger.domain.enums import EntryType, TransactionStatus
from general_ledger.exceptions import (
    InvalidStateError,
    UnbalancedTransactionError,
    ValidationFailedError,
)

DESCRIPTION_MAX_LENGTH = 500
REFERENCE_MAX_LENGTH = 100
ENTRY_DESCRIPTION_MAX_LENGTH = 200
AMOUNT_MAX_DECIMAL_PLACES = 2
MIN_ENTRIES = 2

CANCELLATION_PREFIX = "Cancelled"
CANCELLATION_REFERENCE_PREFIX = "CANCEL-"

# Valid state transitions. CANCELLED is terminal.
VALID_TRANSITIONS: dict[TransactionStatus, set[TransactionStatus]] = {
    TransactionStatus.PENDING: {
        TransactionStatus.APPROVED,
        TransactionStatus.CANCELLED,
    },
    TransactionStatus.APPROVED: {TransactionStatus.CANCELLED},
    TransactionStatus.CANCELLED: set(),
}


def _cancellation_text(text: str | None, max_length: int) -> str:
    marked = f"{CANCELLATION_PREFIX}: {text}" if text else CANCELLATION_PREFIX
    return marked[:max_length]


@dataclass(frozen=True)
class JournalEntry:
    """
    One line of a transaction.

    account_code and account_name are copied from the account when
    the entry is built so that entries can be displayed without
    looking the account up again.
    """

    account_id: int
    account_code: str
    account_name: str
    entry_type: EntryType
    amount: Decimal
    description: str | None = None

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))

        if not self.amount.is_finite() or self.amount <= 0:
            raise ValidationFailedError(
                f"Entry amount must be positive, got {self.amount}"
            )
        if self.amount.as_tuple().exponent < -AMOUNT_MAX_DECIMAL_PLACES:
            raise ValidationFailedError(
                f"Entry amount allows at most {AMOUNT_MAX_DECIMAL_PLACES} "
                f"decimal places, got {self.amount}"
            )
        if (
            self.description is not None
            and len(self.description) > ENTRY_DESCRIPTION_MAX_LENGTH
        ):
            raise ValidationFailedError(
                f"Entry description cannot exceed "
                f"{ENTRY_DESCRIPTION_MAX_LENGTH} characters"
            )

    @property
    def is_debit(self) -> bool:
        return self.entry_type == EntryType.DEBIT

    def reversed(self) -> "JournalEntry":
        """Same account and amount, opposite direction, marked as a cancellation."""
        return replace(
            self,
            entry_type=self.entry_type.opposite(),
            description=_cancellation_text(
                self.description, ENTRY_DESCRIPTION_MAX_LENGTH
            ),
        )

    def __repr__(self) -> str:
        return (
            f"<JournalEntry {self.entry_type.value} "
            f"{self.account_code} {self.amount}>"
        )


@dataclass(frozen=True)
class Transaction:
    """
    A balanced group of journal entries.

    id is None until the transaction store assigns one. New
    transactions start PENDING. Only PENDING transactions may be
    revised; see VALID_TRANSITIONS for the status machine.
    """

    id: int | None
    description: str
    transaction_date: date
    entries: tuple[JournalEntry, ...]
    reference: str | None = None
    status: TransactionStatus = TransactionStatus.PENDING
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        if not isinstance(self.entries, tuple):
            object.__setattr__(self, "entries", tuple(self.entries))

        if not self.description or not self.description.strip():
            raise ValidationFailedError("Transaction description must not be blank")
        if len(self.description) > DESCRIPTION_MAX_LENGTH:
            raise ValidationFailedError(
                f"Transaction description cannot exceed "
                f"{DESCRIPTION_MAX_LENGTH} characters"
            )
        if self.reference is not None and len(self.reference) > REFERENCE_MAX_LENGTH:
            raise ValidationFailedError(
                f"Transaction reference cannot exceed "
                f"{REFERENCE_MAX_LENGTH} characters"
            )
        if len(self.entries) < MIN_ENTRIES:
            raise ValidationFailedError(
                f"Transaction must contain at least {MIN_ENTRIES} journal "
                f"entries, got {len(self.entries)}"
            )
        if not self.is_balanced():
            raise UnbalancedTransactionError(self.debit_total, self.credit_total)

    # --- Totals ---

    @property
    def debit_total(self) -> Decimal:
        return sum(
            (e.amount for e in self.entries if e.entry_type == EntryType.DEBIT),
            Decimal("0"),
        )

    @property
    def credit_total(self) -> Decimal:
        return sum(
            (e.amount for e in self.entries if e.entry_type == EntryType.CREDIT),
            Decimal("0"),
        )

    @property
    def total_amount(self) -> Decimal:
        """The transaction amount is the debit-side sum."""
        return self.debit_total

    def is_balanced(self) -> bool:
        return self.debit_total == self.credit_total

    # --- Lifecycle ---

    def can_transition_to(self, new_status: TransactionStatus) -> bool:
        """Check if a state transition is valid."""
        return new_status in VALID_TRANSITIONS.get(self.status, set())

    def _transition(self, new_status: TransactionStatus) -> "Transaction":
        if not self.can_transition_to(new_status):
            raise InvalidStateError(
                f"Cannot transition transaction {self.id} from "
                f"{self.status.value} to {new_status.value}"
            )
        return replace(self, status=new_status, updated_at=datetime.utcnow())

    def approve(self) -> "Transaction":
        return self._transition(TransactionStatus.APPROVED)

    def cancel(self) -> "Transaction":
        if self.status == TransactionStatus.CANCELLED:
            raise InvalidStateError(f"Transaction {self.id} is already cancelled")
        return self._transition(TransactionStatus.CANCELLED)

    def revise(
        self,
        description: str,
        transaction_date: date,
        reference: str | None,
        entries: list[JournalEntry] | tuple[JournalEntry, ...],
    ) -> "Transaction":
        """
        Return a copy with every editable field replaced.

        Entries are replaced wholesale, never merged. Only PENDING
        transactions can be revised.
        """
        if self.status != TransactionStatus.PENDING:
            raise InvalidStateError(
                f"Transaction {self.id} is {self.status.value} and cannot be "
                f"modified; only PENDING transactions can be updated"
            )
        return replace(
            self,
            description=description,
            transaction_date=transaction_date,
            reference=reference,
            entries=tuple(entries),
            updated_at=datetime.utcnow(),
        )

    def reversal(self) -> "Transaction":
        """
        Build the unsaved transaction that offsets this one.

        Every entry keeps its account and amount with the direction
        flipped. The reversal is already settled, so it starts
        APPROVED rather than PENDING.
        """
        if self.id is None:
            raise InvalidStateError("Cannot reverse a transaction that was never saved")
        return Transaction(
            id=None,
            description=_cancellation_text(
                self.description, DESCRIPTION_MAX_LENGTH
            ),
            transaction_date=self.transaction_date,
            reference=f"{CANCELLATION_REFERENCE_PREFIX}{self.id}",
            entries=tuple(entry.reversed() for entry in self.entries),
            status=TransactionStatus.APPROVED,
        )

    def __repr__(self) -> str:
        return (
            f"<Transaction {self.id} {self.transaction_date} "
            f"{self.total_amount} ({self.status.value})>"
        )
