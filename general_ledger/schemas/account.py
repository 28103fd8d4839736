"""
Pydantic schemas for account operations.

These define the API contract. They are separate from the domain
values because the API shape and the domain shape differ (the API
never accepts an id, timestamps or the active flag).
"""

from datetime import datetime

from pydantic import BaseModel, Field

from general_ledger.domain.account import CODE_MAX_LENGTH, NAME_MAX_LENGTH
from general_ledger.domain.enums import AccountType
from general_ledger.services.commands import (
    CreateAccountCommand,
    UpdateAccountCommand,
)


# --- Request Schemas ---

class AccountCreate(BaseModel):
    """Request to register a new account."""
    code: str = Field(min_length=1, max_length=CODE_MAX_LENGTH)
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    account_type: AccountType
    parent_id: int | None = None

    def to_command(self) -> CreateAccountCommand:
        return CreateAccountCommand(
            code=self.code,
            name=self.name,
            account_type=self.account_type,
            parent_id=self.parent_id,
        )


class AccountUpdate(BaseModel):
    """Request to rename or re-parent an account. Code and type are fixed."""
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    parent_id: int | None = None

    def to_command(self, account_id: int) -> UpdateAccountCommand:
        return UpdateAccountCommand(
            account_id=account_id,
            name=self.name,
            parent_id=self.parent_id,
        )


# --- Response Schemas ---

class AccountResponse(BaseModel):
    id: int
    code: str
    name: str
    account_type: AccountType
    parent_id: int | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
