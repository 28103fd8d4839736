"""
SQLAlchemy implementation of the AccountStore port.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from general_ledger.domain.account import Account
from general_ledger.domain.enums import AccountType
from general_ledger.models.account import AccountModel


class AccountRepository:
    """
    Reads and writes accounts through a caller-owned session.

    Writes are flushed so ids are assigned immediately, but never
    committed; the caller decides when to commit or roll back.
    """

    def __init__(self, db: Session):
        self.db = db

    def save(self, account: Account) -> Account:
        model = None
        if account.id is not None:
            model = self.db.get(AccountModel, account.id)
        if model is None:
            model = AccountModel(id=account.id)
            self.db.add(model)

        model.apply(account)
        self.db.flush()
        return model.to_domain()

    def find_by_id(self, account_id: int) -> Account | None:
        model = self.db.get(AccountModel, account_id)
        return model.to_domain() if model else None

    def find_by_code(self, code: str) -> Account | None:
        model = self.db.execute(
            select(AccountModel).where(AccountModel.code == code)
        ).scalar_one_or_none()
        return model.to_domain() if model else None

    def find_by_type(self, account_type: AccountType) -> list[Account]:
        models = self.db.execute(
            select(AccountModel)
            .where(AccountModel.account_type == account_type)
            .order_by(AccountModel.code)
        ).scalars().all()
        return [m.to_domain() for m in models]

    def find_all_active(self) -> list[Account]:
        models = self.db.execute(
            select(AccountModel)
            .where(AccountModel.is_active.is_(True))
            .order_by(AccountModel.code)
        ).scalars().all()
        return [m.to_domain() for m in models]

    def find_by_parent_id(self, parent_id: int) -> list[Account]:
        models = self.db.execute(
            select(AccountModel)
            .where(AccountModel.parent_id == parent_id)
            .order_by(AccountModel.code)
        ).scalars().all()
        return [m.to_domain() for m in models]

    def exists_by_code(self, code: str) -> bool:
        found = self.db.execute(
            select(AccountModel.id).where(AccountModel.code == code).limit(1)
        ).scalar_one_or_none()
        return found is not None

    def delete(self, account_id: int) -> None:
        model = self.db.get(AccountModel, account_id)
        if model is None:
            return
        self.db.delete(model)
        self.db.flush()
