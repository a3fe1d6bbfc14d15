"""
Domain layer - Pure business logic with zero framework imports.

This package holds the account records, the capability ports consumed by
the sign-up controller, and the account-creation use case.
"""

from .add_account import DbAddAccount
from .exceptions import AccountError, EmailAlreadyInUse
from .models import Account, AddAccountInput
from .ports import AccountRepository, AddAccount, EmailValidator

__all__ = [
    "Account",
    "AccountError",
    "AccountRepository",
    "AddAccount",
    "AddAccountInput",
    "DbAddAccount",
    "EmailAlreadyInUse",
    "EmailValidator",
]
