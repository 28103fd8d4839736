"""
Account API endpoints.

The API layer is thin: it builds the service for the request's
session, commits on success and rolls back on a ledger error.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from general_ledger.api.errors import to_http_exception
from general_ledger.domain.enums import AccountType
from general_ledger.exceptions import LedgerError
from general_ledger.models.base import get_db
from general_ledger.repositories.account_repository import AccountRepository
from general_ledger.repositories.transaction_repository import TransactionRepository
from general_ledger.schemas.account import (
    AccountCreate,
    AccountUpdate,
    AccountResponse,
)
from general_ledger.schemas.transaction import TransactionResponse
from general_ledger.services.account_service import AccountService
from general_ledger.services.transaction_service import TransactionService

router = APIRouter(prefix="/api/v1/accounts", tags=["Accounts"])


@router.post("", response_model=AccountResponse, status_code=201)
def create_account(
    request: AccountCreate,
    db: Session = Depends(get_db),
):
    """
    Register a new account.

    The code must be unique. A parent, if given, must exist and
    be active.
    """
    service = AccountService(AccountRepository(db))
    try:
        account = service.create_account(request.to_command())
        db.commit()
        return account
    except LedgerError as e:
        db.rollback()
        raise to_http_exception(e)


@router.get("", response_model=list[AccountResponse])
def list_accounts(
    account_type: AccountType | None = Query(default=None, alias="type"),
    db: Session = Depends(get_db),
):
    """All accounts of one type, or every active account when no type is given."""
    service = AccountService(AccountRepository(db))
    return service.list_accounts(account_type)


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    db: Session = Depends(get_db),
):
    """Get account details."""
    service = AccountService(AccountRepository(db))
    try:
        return service.get_account(account_id)
    except LedgerError as e:
        raise to_http_exception(e)


@router.put("/{account_id}", response_model=AccountResponse)
def update_account(
    account_id: int,
    request: AccountUpdate,
    db: Session = Depends(get_db),
):
    """Rename an account and set its parent. Code and type cannot change."""
    service = AccountService(AccountRepository(db))
    try:
        account = service.update_account(request.to_command(account_id))
        db.commit()
        return account
    except LedgerError as e:
        db.rollback()
        raise to_http_exception(e)


@router.delete("/{account_id}", response_model=AccountResponse)
def deactivate_account(
    account_id: int,
    db: Session = Depends(get_db),
):
    """
    Deactivate an account.

    The account is kept with is_active=false. Accounts that other
    accounts use as their parent cannot be deactivated.
    """
    service = AccountService(AccountRepository(db))
    try:
        account = service.deactivate_account(account_id)
        db.commit()
        return account
    except LedgerError as e:
        db.rollback()
        raise to_http_exception(e)


@router.get(
    "/{account_id}/transactions",
    response_model=list[TransactionResponse],
)
def get_account_transactions(
    account_id: int,
    db: Session = Depends(get_db),
):
    """All transactions with an entry against this account, newest first."""
    service = TransactionService(TransactionRepository(db), AccountRepository(db))
    try:
        return service.get_account_transactions(account_id)
    except LedgerError as e:
        raise to_http_exception(e)
