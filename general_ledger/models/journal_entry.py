"""
Journal entry table.

Each row is one line of a transaction. account_code and account_name
are denormalized copies taken when the entry was written, so a
transaction can be shown without joining the accounts table.
"""

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import String, Integer, Numeric, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from general_ledger.domain.account import CODE_MAX_LENGTH, NAME_MAX_LENGTH
from general_ledger.domain.enums import EntryType
from general_ledger.domain.transaction import (
    JournalEntry,
    ENTRY_DESCRIPTION_MAX_LENGTH,
)
from general_ledger.models.base import Base

if TYPE_CHECKING:
    from general_ledger.models.transaction import TransactionModel


class JournalEntryModel(Base):
    __tablename__ = "journal_entries"

    id: Mapped[int] = mapped_column(primary_key=True)
    transaction_id: Mapped[int] = mapped_column(
        ForeignKey("transactions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )
    account_code: Mapped[str] = mapped_column(
        String(CODE_MAX_LENGTH), nullable=False
    )
    account_name: Mapped[str] = mapped_column(
        String(NAME_MAX_LENGTH), nullable=False
    )
    entry_type: Mapped[EntryType] = mapped_column(
        SAEnum(EntryType, name="entry_type_enum", create_constraint=True),
        nullable=False,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(19, 2), nullable=False)
    description: Mapped[str | None] = mapped_column(
        String(ENTRY_DESCRIPTION_MAX_LENGTH), nullable=True
    )

    transaction: Mapped["TransactionModel"] = relationship(
        back_populates="entries"
    )

    @classmethod
    def from_domain(cls, entry: JournalEntry, position: int) -> "JournalEntryModel":
        return cls(
            position=position,
            account_id=entry.account_id,
            account_code=entry.account_code,
            account_name=entry.account_name,
            entry_type=entry.entry_type,
            amount=entry.amount,
            description=entry.description,
        )

    def to_domain(self) -> JournalEntry:
        return JournalEntry(
            account_id=self.account_id,
            account_code=self.account_code,
            account_name=self.account_name,
            entry_type=self.entry_type,
            amount=self.amount,
            description=self.description,
        )

    def __repr__(self) -> str:
        return (
            f"<JournalEntryModel {self.entry_type.value} "
            f"{self.account_code} {self.amount}>"
        )
