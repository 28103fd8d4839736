"""
Typed exceptions for the ledger.

Each violated rule has its own class so the presentation layer can
map it to a response without parsing messages. Every class carries a
machine-readable `code`, and the ones that describe a specific record
also keep the offending values as attributes.

    LedgerError
    +-- NotFoundError
    |   +-- AccountNotFoundError
    |   +-- TransactionNotFoundError
    +-- DuplicateCodeError
    +-- InactiveParentError
    +-- InactiveAccountError
    +-- SelfParentError
    +-- HasActiveChildrenError
    +-- UnbalancedTransactionError
    +-- InvalidStateError
    +-- ValidationFailedError
"""

from decimal import Decimal


class LedgerError(Exception):
    """Base exception for all ledger rule violations."""

    code: str = "LEDGER_ERROR"

    @property
    def message(self) -> str:
        return str(self)


class NotFoundError(LedgerError):
    """A referenced record does not exist."""

    code: str = "NOT_FOUND"


class AccountNotFoundError(NotFoundError):

    def __init__(self, account_id: int):
        self.account_id = account_id
        super().__init__(f"Account {account_id} not found")


class TransactionNotFoundError(NotFoundError):

    def __init__(self, transaction_id: int):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction {transaction_id} not found")


class DuplicateCodeError(LedgerError):
    """An account with the same code is already registered."""

    code: str = "DUPLICATE_CODE"

    def __init__(self, account_code: str):
        self.account_code = account_code
        super().__init__(f"Account with code '{account_code}' already exists")


class InactiveParentError(LedgerError):
    """The requested parent account has been deactivated."""

    code: str = "INACTIVE_PARENT"

    def __init__(self, parent_id: int):
        self.parent_id = parent_id
        super().__init__(f"Parent account {parent_id} is not active")


class InactiveAccountError(LedgerError):
    """An entry references a deactivated account."""

    code: str = "INACTIVE_ACCOUNT"

    def __init__(self, account_id: int, account_code: str, account_name: str):
        self.account_id = account_id
        self.account_code = account_code
        super().__init__(
            f"Account {account_name} ({account_code}) is not active"
        )


class SelfParentError(LedgerError):
    """An account was configured as its own parent."""

    code: str = "SELF_PARENT"

    def __init__(self, account_id: int):
        self.account_id = account_id
        super().__init__(f"Account {account_id} cannot be its own parent")


class HasActiveChildrenError(LedgerError):
    """Deactivation is blocked because other accounts point to this one."""

    code: str = "HAS_ACTIVE_CHILDREN"

    def __init__(self, account_id: int, child_ids: list[int]):
        self.account_id = account_id
        self.child_ids = child_ids
        super().__init__(
            f"Account {account_id} has child accounts {child_ids} "
            f"and cannot be deactivated"
        )


class UnbalancedTransactionError(LedgerError):
    """Debit and credit totals differ."""

    code: str = "UNBALANCED"

    def __init__(self, debit_total: Decimal, credit_total: Decimal):
        self.debit_total = debit_total
        self.credit_total = credit_total
        super().__init__(
            f"Transaction does not balance: "
            f"debits={debit_total}, credits={credit_total}"
        )


class InvalidStateError(LedgerError):
    """The transaction's status does not allow the operation."""

    code: str = "INVALID_STATE"


class ValidationFailedError(LedgerError):
    """Structural input violation (sizes, lengths, amounts)."""

    code: str = "VALIDATION_FAILED"
