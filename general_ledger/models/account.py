"""
Account table (chart of accounts).

Storage shape of the Account value. Rows are never deleted by the
normal flow; deactivation flips is_active.
"""

from datetime import datetime

from sqlalchemy import String, Boolean, DateTime, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from general_ledger.domain.account import Account, CODE_MAX_LENGTH, NAME_MAX_LENGTH
from general_ledger.domain.enums import AccountType
from general_ledger.models.base import Base


class AccountModel(Base):
    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(primary_key=True)
    code: Mapped[str] = mapped_column(
        String(CODE_MAX_LENGTH), unique=True, nullable=False
    )
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    account_type: Mapped[AccountType] = mapped_column(
        SAEnum(AccountType, name="account_type_enum", create_constraint=True),
        nullable=False,
        index=True,
    )
    parent_id: Mapped[int | None] = mapped_column(
        ForeignKey("accounts.id"), nullable=True, index=True
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    def to_domain(self) -> Account:
        return Account(
            id=self.id,
            code=self.code,
            name=self.name,
            account_type=self.account_type,
            parent_id=self.parent_id,
            is_active=self.is_active,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def apply(self, account: Account) -> "AccountModel":
        """Copy every stored field from the domain value onto this row."""
        self.code = account.code
        self.name = account.name
        self.account_type = account.account_type
        self.parent_id = account.parent_id
        self.is_active = account.is_active
        self.created_at = account.created_at
        self.updated_at = account.updated_at
        return self

    def __repr__(self) -> str:
        return f"<AccountModel {self.code} ({self.account_type.value})>"
