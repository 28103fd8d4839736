"""
Store interfaces consumed by the services.

AccountService and TransactionService only talk to storage through
these two protocols. The SQLAlchemy repositories in this package
implement them; tests can pass any object with the same methods.

Stores assign identifiers on save and never commit. The caller owns
the database transaction boundary.
"""

from datetime import date
from typing import Protocol

from general_ledger.domain.account import Account
from general_ledger.domain.enums import AccountType
from general_ledger.domain.pagination import Page, PageRequest
from general_ledger.domain.transaction import Transaction


class AccountStore(Protocol):

    def save(self, account: Account) -> Account:
        """Insert or update; returns the account with its id assigned."""
        ...

    def find_by_id(self, account_id: int) -> Account | None: ...

    def find_by_code(self, code: str) -> Account | None: ...

    def find_by_type(self, account_type: AccountType) -> list[Account]: ...

    def find_all_active(self) -> list[Account]: ...

    def find_by_parent_id(self, parent_id: int) -> list[Account]: ...

    def exists_by_code(self, code: str) -> bool: ...

    def delete(self, account_id: int) -> None:
        """Remove the account; does nothing if it does not exist."""
        ...


class TransactionStore(Protocol):

    def save(self, transaction: Transaction) -> Transaction:
        """
        Insert or update; returns the transaction with its id assigned.

        Saving an existing id replaces its entire entry set.
        """
        ...

    def find_by_id(self, transaction_id: int) -> Transaction | None: ...

    def find_by_account_id(self, account_id: int) -> list[Transaction]:
        """Transactions with at least one entry against the account."""
        ...

    def find_by_date_range(
        self, start: date, end: date, page_request: PageRequest
    ) -> Page[Transaction]:
        """Transactions dated within [start, end], both inclusive."""
        ...

    def find_all(self, page_request: PageRequest) -> Page[Transaction]: ...

    def delete(self, transaction_id: int) -> None:
        """Remove the transaction; does nothing if it does not exist."""
        ...
