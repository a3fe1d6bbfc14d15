"""
Domain models - Account records exchanged across the sign-up boundary.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AddAccountInput:
    """Fields required to create an account. Never carries a password confirmation."""

    name: str
    email: str
    password: str


@dataclass(frozen=True)
class Account:
    """
    A created account as returned by the account-creation use case.

    The password field holds whatever the creator stored (a bcrypt hash for
    DbAddAccount). The controller passes the record through untouched.
    """

    id: str
    name: str
    email: str
    password: str
