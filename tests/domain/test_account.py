"""
Tests for the Account value.
"""

import pytest

from general_ledger.domain.account import Account
from general_ledger.domain.enums import AccountType
from general_ledger.exceptions import ValidationFailedError


def make(code="1000", name="Cash", account_type=AccountType.ASSET, **kwargs):
    return Account(id=1, code=code, name=name, account_type=account_type, **kwargs)


def test_new_account_is_active():
    account = make()
    assert account.is_active is True
    assert account.parent_id is None


@pytest.mark.parametrize("code", ["", "  ", "X" * 21])
def test_bad_code_rejected(code):
    with pytest.raises(ValidationFailedError):
        make(code=code)


def test_blank_name_rejected():
    with pytest.raises(ValidationFailedError):
        make(name="")


def test_deactivate_returns_copy():
    account = make()
    deactivated = account.deactivate()

    assert deactivated.is_active is False
    assert account.is_active is True
    assert deactivated.code == account.code


def test_rename_keeps_code_and_type():
    renamed = make().rename("Petty Cash", parent_id=5)

    assert renamed.name == "Petty Cash"
    assert renamed.parent_id == 5
    assert renamed.code == "1000"
    assert renamed.account_type == AccountType.ASSET


@pytest.mark.parametrize("account_type, debit_normal", [
    (AccountType.ASSET, True),
    (AccountType.EXPENSE, True),
    (AccountType.LIABILITY, False),
    (AccountType.EQUITY, False),
    (AccountType.REVENUE, False),
])
def test_normal_balance_side(account_type, debit_normal):
    account = make(account_type=account_type)
    assert account.is_debit_account() is debit_normal
    assert account.is_credit_account() is not debit_normal
