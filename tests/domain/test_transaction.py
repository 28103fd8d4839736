"""
Tests for the Transaction and JournalEntry values.

These need no database: every rule here is checked when the value
is constructed.
"""

import dataclasses
from datetime import date
from decimal import Decimal

import pytest

from general_ledger.domain.enums import EntryType, TransactionStatus
from general_ledger.domain.transaction import JournalEntry, Transaction
from general_ledger.exceptions import (
    InvalidStateError,
    UnbalancedTransactionError,
    ValidationFailedError,
)


def entry(account_id, entry_type, amount, description=None):
    return JournalEntry(
        account_id=account_id,
        account_code=f"{account_id}000",
        account_name=f"Account {account_id}",
        entry_type=entry_type,
        amount=Decimal(amount),
        description=description,
    )


def make_transaction(entries=None, status=TransactionStatus.PENDING, id=7):
    if entries is None:
        entries = [
            entry(1, EntryType.DEBIT, "100.00", "Cash in"),
            entry(2, EntryType.CREDIT, "100.00", "Sales"),
        ]
    return Transaction(
        id=id,
        description="Cash sale",
        transaction_date=date(2024, 1, 15),
        entries=entries,
        status=status,
    )


# --- Balance ---

class TestBalance:

    def test_balanced_transaction_builds(self):
        txn = make_transaction()

        assert txn.is_balanced()
        assert txn.debit_total == Decimal("100.00")
        assert txn.credit_total == Decimal("100.00")
        assert txn.total_amount == Decimal("100.00")

    def test_unbalanced_rejected_with_both_totals(self):
        with pytest.raises(UnbalancedTransactionError) as exc_info:
            make_transaction([
                entry(1, EntryType.DEBIT, "100.00"),
                entry(2, EntryType.CREDIT, "60.00"),
            ])

        error = exc_info.value
        assert error.debit_total == Decimal("100.00")
        assert error.credit_total == Decimal("60.00")
        assert "100.00" in str(error)
        assert "60.00" in str(error)

    def test_balance_is_exact_not_approximate(self):
        with pytest.raises(UnbalancedTransactionError):
            make_transaction([
                entry(1, EntryType.DEBIT, "100.00"),
                entry(2, EntryType.CREDIT, "99.99"),
            ])

    def test_split_entries_balance(self):
        txn = make_transaction([
            entry(1, EntryType.DEBIT, "0.10"),
            entry(1, EntryType.DEBIT, "0.20"),
            entry(2, EntryType.CREDIT, "0.30"),
        ])
        assert txn.total_amount == Decimal("0.30")

    def test_entries_stored_as_tuple(self):
        txn = make_transaction()
        assert isinstance(txn.entries, tuple)


# --- Structure ---

class TestStructure:

    def test_single_entry_rejected(self):
        with pytest.raises(ValidationFailedError, match="at least 2"):
            make_transaction([entry(1, EntryType.DEBIT, "100.00")])

    def test_no_entries_rejected(self):
        with pytest.raises(ValidationFailedError):
            make_transaction([])

    def test_blank_description_rejected(self):
        with pytest.raises(ValidationFailedError):
            Transaction(
                id=None,
                description="   ",
                transaction_date=date(2024, 1, 15),
                entries=make_transaction().entries,
            )

    def test_long_description_rejected(self):
        with pytest.raises(ValidationFailedError):
            Transaction(
                id=None,
                description="x" * 501,
                transaction_date=date(2024, 1, 15),
                entries=make_transaction().entries,
            )

    def test_values_are_immutable(self):
        txn = make_transaction()
        with pytest.raises(dataclasses.FrozenInstanceError):
            txn.status = TransactionStatus.CANCELLED


class TestJournalEntry:

    @pytest.mark.parametrize("amount", ["0", "-5.00"])
    def test_non_positive_amount_rejected(self, amount):
        with pytest.raises(ValidationFailedError, match="positive"):
            entry(1, EntryType.DEBIT, amount)

    def test_three_decimal_places_rejected(self):
        with pytest.raises(ValidationFailedError, match="decimal places"):
            entry(1, EntryType.DEBIT, "10.005")

    def test_two_decimal_places_accepted(self):
        assert entry(1, EntryType.DEBIT, "10.05").amount == Decimal("10.05")

    def test_long_description_rejected(self):
        with pytest.raises(ValidationFailedError):
            entry(1, EntryType.DEBIT, "10.00", description="x" * 201)

    def test_reversed_flips_direction_only(self):
        original = entry(1, EntryType.DEBIT, "25.00", "Office chair")
        flipped = original.reversed()

        assert flipped.entry_type == EntryType.CREDIT
        assert flipped.account_id == original.account_id
        assert flipped.amount == original.amount
        assert flipped.description == "Cancelled: Office chair"
        assert original.entry_type == EntryType.DEBIT


# --- Lifecycle ---

class TestLifecycle:

    def test_new_transaction_is_pending(self):
        assert make_transaction().status == TransactionStatus.PENDING

    def test_approve_pending(self):
        assert make_transaction().approve().status == TransactionStatus.APPROVED

    def test_approve_twice_rejected(self):
        approved = make_transaction().approve()
        with pytest.raises(InvalidStateError):
            approved.approve()

    def test_cancel_approved(self):
        cancelled = make_transaction().approve().cancel()
        assert cancelled.status == TransactionStatus.CANCELLED

    def test_cancel_twice_rejected(self):
        cancelled = make_transaction().cancel()
        with pytest.raises(InvalidStateError, match="already cancelled"):
            cancelled.cancel()

    def test_cancelled_cannot_be_approved(self):
        with pytest.raises(InvalidStateError):
            make_transaction().cancel().approve()

    def test_cancel_returns_new_value(self):
        original = make_transaction()
        original.cancel()
        assert original.status == TransactionStatus.PENDING


class TestRevise:

    def test_revise_replaces_everything(self):
        txn = make_transaction()
        revised = txn.revise(
            description="Corrected sale",
            transaction_date=date(2024, 1, 16),
            reference="INV-1",
            entries=[
                entry(1, EntryType.DEBIT, "80.00"),
                entry(3, EntryType.DEBIT, "20.00"),
                entry(2, EntryType.CREDIT, "100.00"),
            ],
        )

        assert revised.id == txn.id
        assert revised.description == "Corrected sale"
        assert revised.transaction_date == date(2024, 1, 16)
        assert revised.reference == "INV-1"
        assert [e.account_id for e in revised.entries] == [1, 3, 2]

    def test_revise_rechecks_balance(self):
        with pytest.raises(UnbalancedTransactionError):
            make_transaction().revise(
                description="Broken",
                transaction_date=date(2024, 1, 16),
                reference=None,
                entries=[
                    entry(1, EntryType.DEBIT, "100.00"),
                    entry(2, EntryType.CREDIT, "10.00"),
                ],
            )

    @pytest.mark.parametrize(
        "status", [TransactionStatus.APPROVED, TransactionStatus.CANCELLED]
    )
    def test_revise_outside_pending_rejected(self, status):
        txn = make_transaction(status=status)
        with pytest.raises(InvalidStateError):
            txn.revise(
                description="Too late",
                transaction_date=date(2024, 1, 16),
                reference=None,
                entries=txn.entries,
            )


class TestReversal:

    def test_reversal_mirrors_original(self):
        original = make_transaction()
        reversal = original.reversal()

        assert reversal.id is None
        assert reversal.status == TransactionStatus.APPROVED
        assert reversal.reference == "CANCEL-7"
        assert reversal.transaction_date == original.transaction_date
        assert reversal.description == "Cancelled: Cash sale"
        assert [(e.account_id, e.entry_type, e.amount) for e in reversal.entries] == [
            (1, EntryType.CREDIT, Decimal("100.00")),
            (2, EntryType.DEBIT, Decimal("100.00")),
        ]
        assert reversal.debit_total == reversal.credit_total

    def test_reversal_of_long_description_fits(self):
        txn = dataclasses.replace(make_transaction(), description="x" * 500)
        assert len(txn.reversal().description) == 500

    def test_unsaved_transaction_cannot_be_reversed(self):
        with pytest.raises(InvalidStateError):
            make_transaction(id=None).reversal()
