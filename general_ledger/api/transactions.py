"""
Transaction API endpoints.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from general_ledger.api.errors import to_http_exception
from general_ledger.config import get_settings
from general_ledger.domain.pagination import PageRequest
from general_ledger.exceptions import LedgerError
from general_ledger.models.base import get_db
from general_ledger.repositories.account_repository import AccountRepository
from general_ledger.repositories.transaction_repository import TransactionRepository
from general_ledger.schemas.transaction import (
    TransactionCreate,
    TransactionUpdate,
    TransactionCancel,
    TransactionResponse,
    CancelTransactionResponse,
    TransactionPageResponse,
)
from general_ledger.services.commands import TransactionQuery
from general_ledger.services.transaction_service import TransactionService

router = APIRouter(prefix="/api/v1/transactions", tags=["Transactions"])

settings = get_settings()


def get_transaction_service(db: Session = Depends(get_db)) -> TransactionService:
    return TransactionService(TransactionRepository(db), AccountRepository(db))


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    request: TransactionCreate,
    db: Session = Depends(get_db),
    service: TransactionService = Depends(get_transaction_service),
):
    """
    Record a new transaction in PENDING status.

    Debits must equal credits and every account must exist and
    be active.
    """
    try:
        txn = service.create_transaction(request.to_command())
        db.commit()
        return txn
    except LedgerError as e:
        db.rollback()
        raise to_http_exception(e)


@router.get("", response_model=TransactionPageResponse)
def get_transactions(
    start_date: date | None = None,
    end_date: date | None = None,
    page: int = Query(default=0, ge=0),
    size: int = Query(default=settings.DEFAULT_PAGE_SIZE, ge=1),
    service: TransactionService = Depends(get_transaction_service),
):
    """
    Page through transactions, newest first.

    Cancelled transactions and their reversals are included.
    """
    if size > settings.MAX_PAGE_SIZE:
        raise HTTPException(
            status_code=400,
            detail=f"size cannot exceed {settings.MAX_PAGE_SIZE}",
        )
    try:
        result = service.get_transactions(TransactionQuery(
            start_date=start_date,
            end_date=end_date,
            page_request=PageRequest(page=page, size=size),
        ))
    except LedgerError as e:
        raise to_http_exception(e)
    return TransactionPageResponse.from_page(result)


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: int,
    service: TransactionService = Depends(get_transaction_service),
):
    """Get transaction details with its journal entries."""
    try:
        return service.get_transaction(transaction_id)
    except LedgerError as e:
        raise to_http_exception(e)


@router.put("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: int,
    request: TransactionUpdate,
    db: Session = Depends(get_db),
    service: TransactionService = Depends(get_transaction_service),
):
    """
    Replace a PENDING transaction.

    All existing entries are replaced by the ones in the request.
    """
    try:
        txn = service.update_transaction(request.to_command(transaction_id))
        db.commit()
        return txn
    except LedgerError as e:
        db.rollback()
        raise to_http_exception(e)


@router.post("/{transaction_id}/approve", response_model=TransactionResponse)
def approve_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
    service: TransactionService = Depends(get_transaction_service),
):
    """Approve a PENDING transaction. Approved transactions can no longer be edited."""
    try:
        txn = service.approve_transaction(transaction_id)
        db.commit()
        return txn
    except LedgerError as e:
        db.rollback()
        raise to_http_exception(e)


@router.post(
    "/{transaction_id}/cancel",
    response_model=CancelTransactionResponse,
)
def cancel_transaction(
    transaction_id: int,
    request: TransactionCancel,
    db: Session = Depends(get_db),
    service: TransactionService = Depends(get_transaction_service),
):
    """
    Cancel a transaction and post its reversal.

    The cancelled original and the reversal are committed together.
    """
    try:
        result = service.cancel_transaction(request.to_command(transaction_id))
        db.commit()
    except LedgerError as e:
        db.rollback()
        raise to_http_exception(e)
    return CancelTransactionResponse.from_result(result)
