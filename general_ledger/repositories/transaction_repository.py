"""
SQLAlchemy implementation of the TransactionStore port.

Listings are ordered newest first: by transaction date descending,
then by id descending for transactions on the same date.
"""

from datetime import date

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from general_ledger.domain.pagination import Page, PageRequest
from general_ledger.domain.transaction import Transaction
from general_ledger.models.journal_entry import JournalEntryModel
from general_ledger.models.transaction import TransactionModel

NEWEST_FIRST = (
    TransactionModel.transaction_date.desc(),
    TransactionModel.id.desc(),
)


class TransactionRepository:

    def __init__(self, db: Session):
        self.db = db

    def save(self, transaction: Transaction) -> Transaction:
        """
        Insert a new transaction or fully replace an existing one.

        Replacing the entries list on the row orphans the previous
        entry rows, which the cascade deletes on flush.
        """
        model = None
        if transaction.id is not None:
            model = self.db.get(TransactionModel, transaction.id)
        if model is None:
            model = TransactionModel(id=transaction.id)
            self.db.add(model)

        model.apply(transaction)
        self.db.flush()
        return model.to_domain()

    def find_by_id(self, transaction_id: int) -> Transaction | None:
        model = self.db.get(TransactionModel, transaction_id)
        return model.to_domain() if model else None

    def find_by_account_id(self, account_id: int) -> list[Transaction]:
        models = self.db.execute(
            select(TransactionModel)
            .where(
                TransactionModel.entries.any(
                    JournalEntryModel.account_id == account_id
                )
            )
            .order_by(*NEWEST_FIRST)
        ).scalars().all()
        return [m.to_domain() for m in models]

    def find_by_date_range(
        self, start: date, end: date, page_request: PageRequest
    ) -> Page[Transaction]:
        return self._page(
            page_request,
            TransactionModel.transaction_date >= start,
            TransactionModel.transaction_date <= end,
        )

    def find_all(self, page_request: PageRequest) -> Page[Transaction]:
        return self._page(page_request)

    def delete(self, transaction_id: int) -> None:
        model = self.db.get(TransactionModel, transaction_id)
        if model is None:
            return
        self.db.delete(model)
        self.db.flush()

    def _page(self, page_request: PageRequest, *criteria) -> Page[Transaction]:
        total = self.db.execute(
            select(func.count()).select_from(TransactionModel).where(*criteria)
        ).scalar_one()

        models = self.db.execute(
            select(TransactionModel)
            .where(*criteria)
            .order_by(*NEWEST_FIRST)
            .offset(page_request.offset)
            .limit(page_request.size)
        ).scalars().all()

        return Page(
            items=[m.to_domain() for m in models],
            total=total,
            page=page_request.page,
            size=page_request.size,
        )
