"""
Transaction service: the core of the ledger.

Each write operation:
1. Resolves every entry's account (must exist and be active)
2. Builds the journal entries with the account's code and name
3. Builds a new Transaction value, which re-checks the entry count
   and that debits equal credits
4. Saves it through the transaction store

Cancellation never deletes anything. The original is marked
CANCELLED and a reversal transaction with every entry flipped is
saved next to it. These are two separate store writes: if the
second fails, the error propagates and the caller must roll back
(the API layer does). The service itself never commits.
"""

from datetime import date

from general_ledger.domain.enums import TransactionStatus
from general_ledger.domain.pagination import Page
from general_ledger.domain.transaction import JournalEntry, Transaction
from general_ledger.exceptions import (
    AccountNotFoundError,
    InactiveAccountError,
    InvalidStateError,
    TransactionNotFoundError,
    ValidationFailedError,
)
from general_ledger.logging_config import get_logger
from general_ledger.repositories.ports import AccountStore, TransactionStore
from general_ledger.services.commands import (
    CancellationResult,
    CancelTransactionCommand,
    CreateTransactionCommand,
    EntryCommand,
    TransactionQuery,
    UpdateTransactionCommand,
)

logger = get_logger("services.transaction")


class TransactionService:

    def __init__(self, transactions: TransactionStore, accounts: AccountStore):
        self.transactions = transactions
        self.accounts = accounts

    def _build_entries(self, commands: list[EntryCommand]) -> list[JournalEntry]:
        """Resolve each entry's account and build the journal entries."""
        entries = []
        for command in commands:
            account = self.accounts.find_by_id(command.account_id)
            if account is None:
                raise AccountNotFoundError(command.account_id)
            if not account.is_active:
                raise InactiveAccountError(account.id, account.code, account.name)

            entries.append(JournalEntry(
                account_id=account.id,
                account_code=account.code,
                account_name=account.name,
                entry_type=command.entry_type,
                amount=command.amount,
                description=command.description,
            ))
        return entries

    def create_transaction(self, command: CreateTransactionCommand) -> Transaction:
        """
        Record a new transaction in PENDING status.

        Raises AccountNotFoundError or InactiveAccountError for a bad
        account, ValidationFailedError for fewer than two entries, and
        UnbalancedTransactionError if debits and credits differ.
        """
        entries = self._build_entries(command.entries)
        transaction = Transaction(
            id=None,
            description=command.description,
            transaction_date=command.transaction_date,
            reference=command.reference,
            entries=tuple(entries),
            status=TransactionStatus.PENDING,
        )

        saved = self.transactions.save(transaction)
        logger.info(
            "Created transaction id=%s date=%s total=%s",
            saved.id, saved.transaction_date, saved.total_amount,
        )
        return saved

    def update_transaction(self, command: UpdateTransactionCommand) -> Transaction:
        """
        Replace a PENDING transaction's description, date, reference
        and entries. Entries are replaced wholesale, not merged.
        """
        existing = self.get_transaction(command.transaction_id)
        if existing.status != TransactionStatus.PENDING:
            raise InvalidStateError(
                f"Transaction {existing.id} is {existing.status.value}; "
                f"only PENDING transactions can be updated"
            )

        entries = self._build_entries(command.entries)
        revised = existing.revise(
            description=command.description,
            transaction_date=command.transaction_date,
            reference=command.reference,
            entries=entries,
        )

        saved = self.transactions.save(revised)
        logger.info(
            "Updated transaction id=%s total=%s", saved.id, saved.total_amount
        )
        return saved

    def approve_transaction(self, transaction_id: int) -> Transaction:
        """Move a PENDING transaction to APPROVED."""
        existing = self.get_transaction(transaction_id)
        saved = self.transactions.save(existing.approve())
        logger.info("Approved transaction id=%s", saved.id)
        return saved

    def cancel_transaction(
        self, command: CancelTransactionCommand
    ) -> CancellationResult:
        """
        Cancel a transaction and record its reversal.

        Writes, in order:
        1. the original, now CANCELLED
        2. a new APPROVED transaction with every entry's direction
           flipped, the original date, and reference CANCEL-<id>

        A failure in step 2 is re-raised unchanged; step 1 is not
        undone here.
        """
        if not command.cancel_reason or not command.cancel_reason.strip():
            raise ValidationFailedError("A cancel reason is required")

        original = self.get_transaction(command.transaction_id)
        if original.status == TransactionStatus.CANCELLED:
            raise InvalidStateError(
                f"Transaction {original.id} is already cancelled"
            )

        cancelled = self.transactions.save(original.cancel())

        try:
            reversal = self.transactions.save(original.reversal())
        except Exception:
            logger.error(
                "Transaction id=%s was marked CANCELLED but its reversal "
                "could not be saved",
                original.id,
            )
            raise

        logger.info(
            "Cancelled transaction id=%s with reversal id=%s reason=%r",
            cancelled.id, reversal.id, command.cancel_reason,
        )
        return CancellationResult(
            original=cancelled,
            reversal=reversal,
            cancel_reason=command.cancel_reason,
        )

    def get_transaction(self, transaction_id: int) -> Transaction:
        """Get a transaction by ID."""
        transaction = self.transactions.find_by_id(transaction_id)
        if transaction is None:
            raise TransactionNotFoundError(transaction_id)
        return transaction

    def get_transactions(self, query: TransactionQuery) -> Page[Transaction]:
        """
        Page through transactions, cancelled ones included.

        With no dates every transaction is returned. With one or both
        dates the range is inclusive and an omitted bound is open.
        """
        if query.start_date is None and query.end_date is None:
            return self.transactions.find_all(query.page_request)

        start = query.start_date or date.min
        end = query.end_date or date.max
        if start > end:
            raise ValidationFailedError(
                f"start_date {start} is after end_date {end}"
            )
        return self.transactions.find_by_date_range(
            start, end, query.page_request
        )

    def get_account_transactions(self, account_id: int) -> list[Transaction]:
        """Every transaction with at least one entry against the account."""
        if self.accounts.find_by_id(account_id) is None:
            raise AccountNotFoundError(account_id)
        return self.transactions.find_by_account_id(account_id)
