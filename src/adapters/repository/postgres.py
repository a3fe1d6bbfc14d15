"""
PostgreSQL repository adapter - Implements AccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Email uniqueness is enforced by the UNIQUE constraint on accounts.email,
so concurrent sign-ups for the same address cannot both succeed. The
constraint violation is translated into the domain's EmailAlreadyInUse.
"""

import logging
from pathlib import Path

from psycopg import errors
from psycopg_pool import ConnectionPool

from src.domain.exceptions import EmailAlreadyInUse
from src.domain.models import Account

logger = logging.getLogger(__name__)


class PostgresAccountRepository:
    """
    Implements AccountRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def add(self, name: str, email: str, password_hash: str) -> Account:
        """
        Insert a new account and return it with its generated id.

        Args:
            name: Display name
            email: Email address as submitted
            password_hash: bcrypt-hashed password from the domain layer

        Returns:
            The stored Account

        Raises:
            EmailAlreadyInUse: If the email is already registered
        """
        sql = """
            INSERT INTO accounts (name, email, password_hash, created_at)
            VALUES (%s, %s, %s, NOW())
            RETURNING id
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            try:
                cursor.execute(sql, (name, email, password_hash))
            except errors.UniqueViolation:
                conn.rollback()
                logger.warning("Account creation rejected: email already in use")
                raise EmailAlreadyInUse(email) from None
            row = cursor.fetchone()
            conn.commit()

        account_id = str(row[0])
        logger.info("Account created: %s", account_id)
        return Account(id=account_id, name=name, email=email, password=password_hash)


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
