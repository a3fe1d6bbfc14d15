"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
the sign-up controller and its collaborators into routes.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.validators.validator import EmailValidatorAdapter
from src.adapters.repository.postgres import PostgresAccountRepository
from src.config.settings import get_settings
from src.domain.add_account import DbAddAccount
from src.presentation.signup import SignUpController


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresAccountRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresAccountRepository(pool)


def get_email_validator() -> EmailValidatorAdapter:
    """Create email validator configured from settings."""
    settings = get_settings()
    return EmailValidatorAdapter(check_deliverability=settings.email_check_deliverability)


def get_signup_controller(request: Request) -> SignUpController:
    """
    Create sign-up controller with injected dependencies.

    Wires together the email validator and the account-creation use case.
    """
    settings = get_settings()
    add_account = DbAddAccount(
        repository=get_repository(request),
        bcrypt_cost=settings.bcrypt_cost,
    )
    return SignUpController(email_validator=get_email_validator(), add_account=add_account)
