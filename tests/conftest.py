"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Sign-up request payloads
- Stub collaborators for the sign-up controller
"""

from unittest.mock import Mock

import pytest

from src.domain.models import Account
from src.presentation.http import SignUpRequest


@pytest.fixture
def valid_request() -> SignUpRequest:
    """A sign-up request that passes every presence and confirmation check."""
    return SignUpRequest(
        name="Test Name",
        email="test@test.com.br",
        password="myPassword",
        password_confirmation="myPassword",
    )


@pytest.fixture
def created_account() -> Account:
    """Account record returned by the account-creation stub."""
    return Account(
        id="valid_id",
        name="Test Name",
        email="test@test.com.br",
        password="hashed_password",
    )


@pytest.fixture
def email_validator() -> Mock:
    """EmailValidator stub accepting every email."""
    validator = Mock()
    validator.is_valid.return_value = True
    return validator


@pytest.fixture
def add_account(created_account: Account) -> Mock:
    """AddAccount stub returning created_account."""
    stub = Mock()
    stub.add.return_value = created_account
    return stub
