"""
Translation of ledger errors into HTTP errors.

Each LedgerError subclass maps to exactly one status code:
not found (404), conflict with the current state (409), or a bad
request (400).
"""

from fastapi import HTTPException

from general_ledger.exceptions import (
    DuplicateCodeError,
    HasActiveChildrenError,
    InvalidStateError,
    LedgerError,
    NotFoundError,
)

CONFLICT_ERRORS = (DuplicateCodeError, HasActiveChildrenError, InvalidStateError)


def status_code_for(error: LedgerError) -> int:
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, CONFLICT_ERRORS):
        return 409
    return 400


def to_http_exception(error: LedgerError) -> HTTPException:
    return HTTPException(
        status_code=status_code_for(error),
        detail={"code": error.code, "message": error.message},
    )
