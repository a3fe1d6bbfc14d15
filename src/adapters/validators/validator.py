"""
Email validator adapter - Implements EmailValidator protocol.

This module provides the email-validator library implementation of the
domain's email validation port.
"""

from email_validator import EmailNotValidError, validate_email


class EmailValidatorAdapter:
    """
    Implements EmailValidator protocol via the email-validator library.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Syntax-only by default; DNS deliverability checks are opt-in because
    they make validation depend on network access.
    """

    def __init__(self, check_deliverability: bool = False) -> None:
        self._check_deliverability = check_deliverability

    def is_valid(self, email: str) -> bool:
        """
        Check email syntax (and optionally domain deliverability).

        Only EmailNotValidError maps to False. Any other failure propagates
        so the controller reports it as a server error.
        """
        try:
            validate_email(email, check_deliverability=self._check_deliverability)
        except EmailNotValidError:
            return False
        return True
