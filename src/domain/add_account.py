"""
Account-creation use case - Hash the password and persist the account.
"""

from dataclasses import dataclass

import bcrypt

from .models import Account, AddAccountInput
from .ports import AccountRepository

MIN_BCRYPT_COST = 10


@dataclass
class DbAddAccount:
    """
    Implements the AddAccount port on top of an AccountRepository.

    The plaintext password never reaches the repository; only its bcrypt
    hash does.
    """

    repository: AccountRepository
    bcrypt_cost: int = MIN_BCRYPT_COST

    def __post_init__(self) -> None:
        if self.bcrypt_cost < MIN_BCRYPT_COST:
            raise ValueError(f"bcrypt cost must be >= {MIN_BCRYPT_COST}, got {self.bcrypt_cost}")

    def add(self, account: AddAccountInput) -> Account:
        """
        Create an account.

        Args:
            account: Name, email and plaintext password

        Returns:
            The stored Account (password field holds the hash)

        Raises:
            EmailAlreadyInUse: If the repository already holds the email
        """
        password_hash = self._hash_password(account.password)
        return self.repository.add(account.name, account.email, password_hash)

    def _hash_password(self, password: str) -> str:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.bcrypt_cost)).decode()
