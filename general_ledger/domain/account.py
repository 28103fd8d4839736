"""
Account value (chart of accounts).

Accounts are immutable values. Every change produces a new Account
that the caller hands back to the account store. An account is
never deleted once created, only deactivated via is_active=False.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime

from general_ledger.domain.enums import AccountType
from general_ledger.exceptions import ValidationFailedError

CODE_MAX_LENGTH = 20
NAME_MAX_LENGTH = 100

DEBIT_NORMAL_TYPES = frozenset({AccountType.ASSET, AccountType.EXPENSE})


@dataclass(frozen=True)
class Account:
    """
    A single account in the chart of accounts.

    id is None until the account store assigns one. parent_id
    points to another account in the hierarchy; whether that parent
    exists and is active is checked by the AccountService, which
    has access to the store.
    """

    id: int | None
    code: str
    name: str
    account_type: AccountType
    parent_id: int | None = None
    is_active: bool = True
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        if not self.code or not self.code.strip():
            raise ValidationFailedError("Account code must not be blank")
        if len(self.code) > CODE_MAX_LENGTH:
            raise ValidationFailedError(
                f"Account code cannot exceed {CODE_MAX_LENGTH} characters"
            )
        if not self.name or not self.name.strip():
            raise ValidationFailedError("Account name must not be blank")
        if len(self.name) > NAME_MAX_LENGTH:
            raise ValidationFailedError(
                f"Account name cannot exceed {NAME_MAX_LENGTH} characters"
            )

    def is_debit_account(self) -> bool:
        """ASSET and EXPENSE accounts increase on the debit side."""
        return self.account_type in DEBIT_NORMAL_TYPES

    def is_credit_account(self) -> bool:
        return not self.is_debit_account()

    def rename(self, name: str, parent_id: int | None) -> "Account":
        """Return a copy with a new name and parent. Code and type never change."""
        return replace(
            self, name=name, parent_id=parent_id, updated_at=datetime.utcnow()
        )

    def deactivate(self) -> "Account":
        return replace(self, is_active=False, updated_at=datetime.utcnow())

    def __repr__(self) -> str:
        state = "active" if self.is_active else "inactive"
        return f"<Account {self.code} ({self.account_type.value}, {state})>"
