"""
Account service: the chart of accounts and its hierarchy.

This is the only place accounts are created or changed. It enforces:
1. Account codes are unique
2. A parent account must exist and be active
3. An account cannot be its own parent
4. An account with child accounts cannot be deactivated

Code and type are fixed at creation. Accounts are never deleted,
only deactivated, and there is no reactivation.
"""

from general_ledger.domain.account import Account
from general_ledger.domain.enums import AccountType
from general_ledger.exceptions import (
    AccountNotFoundError,
    DuplicateCodeError,
    HasActiveChildrenError,
    InactiveParentError,
    SelfParentError,
)
from general_ledger.logging_config import get_logger
from general_ledger.repositories.ports import AccountStore
from general_ledger.services.commands import (
    CreateAccountCommand,
    UpdateAccountCommand,
)

logger = get_logger("services.account")


class AccountService:

    def __init__(self, accounts: AccountStore):
        self.accounts = accounts

    def _require_active_parent(self, parent_id: int) -> Account:
        parent = self.accounts.find_by_id(parent_id)
        if parent is None:
            raise AccountNotFoundError(parent_id)
        if not parent.is_active:
            raise InactiveParentError(parent_id)
        return parent

    def create_account(self, command: CreateAccountCommand) -> Account:
        """
        Register a new account.

        Raises DuplicateCodeError if the code is taken, and
        AccountNotFoundError / InactiveParentError for a bad parent.
        The store assigns the id.
        """
        if self.accounts.exists_by_code(command.code):
            raise DuplicateCodeError(command.code)

        if command.parent_id is not None:
            self._require_active_parent(command.parent_id)

        account = self.accounts.save(Account(
            id=None,
            code=command.code,
            name=command.name,
            account_type=command.account_type,
            parent_id=command.parent_id,
        ))
        logger.info(
            "Created account %s (%s) id=%s",
            account.code, account.account_type.value, account.id,
        )
        return account

    def update_account(self, command: UpdateAccountCommand) -> Account:
        """
        Rename an account and set its parent.

        The parent is replaced as given: omitting parent_id moves the
        account to the top of the hierarchy.
        """
        account = self.get_account(command.account_id)

        if command.parent_id is not None:
            if command.parent_id == command.account_id:
                raise SelfParentError(command.account_id)
            self._require_active_parent(command.parent_id)

        updated = self.accounts.save(
            account.rename(command.name, command.parent_id)
        )
        logger.info("Updated account %s id=%s", updated.code, updated.id)
        return updated

    def deactivate_account(self, account_id: int) -> Account:
        """
        Deactivate an account.

        Any account that names this one as its parent blocks the
        deactivation, whether or not that child is itself active.
        """
        account = self.get_account(account_id)

        children = self.accounts.find_by_parent_id(account_id)
        if children:
            raise HasActiveChildrenError(
                account_id, [child.id for child in children]
            )

        deactivated = self.accounts.save(account.deactivate())
        logger.info("Deactivated account %s id=%s", deactivated.code, account_id)
        return deactivated

    def get_account(self, account_id: int) -> Account:
        """Get an account by ID."""
        account = self.accounts.find_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    def list_by_type(self, account_type: AccountType) -> list[Account]:
        return self.accounts.find_by_type(account_type)

    def list_all_active(self) -> list[Account]:
        return self.accounts.find_all_active()

    def list_accounts(self, account_type: AccountType | None = None) -> list[Account]:
        """Accounts of one type (active or not), or every active account."""
        if account_type is not None:
            return self.list_by_type(account_type)
        return self.list_all_active()
