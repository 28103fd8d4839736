"""
Transaction table.

Storage shape of the Transaction value. The journal entries hang off
the transaction with a delete-orphan cascade: they are created and
destroyed together with it, and replacing the entries list removes
the old rows.
"""

from datetime import date, datetime

from sqlalchemy import String, Date, DateTime, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from general_ledger.domain.enums import TransactionStatus
from general_ledger.domain.transaction import (
    Transaction,
    DESCRIPTION_MAX_LENGTH,
    REFERENCE_MAX_LENGTH,
)
from general_ledger.models.base import Base
from general_ledger.models.journal_entry import JournalEntryModel


class TransactionModel(Base):
    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(primary_key=True)
    description: Mapped[str] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH), nullable=False
    )
    transaction_date: Mapped[date] = mapped_column(
        Date, nullable=False, index=True
    )
    reference: Mapped[str | None] = mapped_column(
        String(REFERENCE_MAX_LENGTH), nullable=True
    )
    status: Mapped[TransactionStatus] = mapped_column(
        SAEnum(
            TransactionStatus,
            name="transaction_status_enum",
            create_constraint=True,
        ),
        nullable=False,
        default=TransactionStatus.PENDING,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    entries: Mapped[list[JournalEntryModel]] = relationship(
        back_populates="transaction",
        cascade="all, delete-orphan",
        order_by=JournalEntryModel.position,
        lazy="selectin",
    )

    def to_domain(self) -> Transaction:
        return Transaction(
            id=self.id,
            description=self.description,
            transaction_date=self.transaction_date,
            reference=self.reference,
            status=self.status,
            entries=tuple(entry.to_domain() for entry in self.entries),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def apply(self, transaction: Transaction) -> "TransactionModel":
        """Copy the domain value onto this row, replacing all entry rows."""
        self.description = transaction.description
        self.transaction_date = transaction.transaction_date
        self.reference = transaction.reference
        self.status = transaction.status
        self.created_at = transaction.created_at
        self.updated_at = transaction.updated_at
        self.entries = [
            JournalEntryModel.from_domain(entry, position)
            for position, entry in enumerate(transaction.entries)
        ]
        return self

    def __repr__(self) -> str:
        return (
            f"<TransactionModel {self.id} {self.transaction_date} "
            f"({self.status.value})>"
        )
