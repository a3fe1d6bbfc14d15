"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the capabilities the sign-up controller and the
account-creation use case require. Adapters implement these protocols
through structural subtyping.
"""

from typing import Protocol

from .models import Account, AddAccountInput


class EmailValidator(Protocol):
    """Port interface for email format validation."""

    def is_valid(self, email: str) -> bool:
        """
        Check whether a string is an acceptable email address.

        Args:
            email: Raw email exactly as received in the request

        Returns:
            True if the email is valid, False otherwise

        Implementations may raise on internal failure; callers treat that
        as a server error, not as an invalid email.
        """
        ...


class AddAccount(Protocol):
    """Port interface for the account-creation use case."""

    def add(self, account: AddAccountInput) -> Account:
        """
        Create an account from name, email and password.

        Args:
            account: Validated account fields

        Returns:
            The created Account
        """
        ...


class AccountRepository(Protocol):
    """Port interface for account persistence."""

    def add(self, name: str, email: str, password_hash: str) -> Account:
        """
        Persist a new account.

        Args:
            name: Display name
            email: Email address as submitted
            password_hash: bcrypt hashed password

        Returns:
            The stored Account with its generated id

        Raises:
            EmailAlreadyInUse: If an account already exists for the email
        """
        ...
