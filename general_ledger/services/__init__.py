"""Business logic services."""

from general_ledger.services.account_service import AccountService
from general_ledger.services.transaction_service import TransactionService

__all__ = ["AccountService", "TransactionService"]
