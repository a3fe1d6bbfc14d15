"""
SignUp controller - Validation and response mapping for account registration.

Validation order (first failure wins):
    1. name, email, password, passwordConfirmation present   -> 400 MissingParamError
    2. password == passwordConfirmation                      -> 400 InvalidParamError
    3. email accepted by the EmailValidator                  -> 400 InvalidParamError
    4. account created by AddAccount                         -> 200 Account

Any exception raised by the two collaborators becomes a 500 ServerError.
The original exception is discarded at this boundary.
"""

from dataclasses import dataclass

from src.domain.models import AddAccountInput
from src.domain.ports import AddAccount, EmailValidator

from .errors import InvalidParamError, MissingParamError
from .http import HttpResponse, SignUpRequest, bad_request, ok, server_error

# (request attribute, parameter name reported to the caller), in check order
REQUIRED_FIELDS = (
    ("name", "name"),
    ("email", "email"),
    ("password", "password"),
    ("password_confirmation", "passwordConfirmation"),
)


@dataclass
class SignUpController:
    """
    Stateless request handler for account sign-up.

    Holds its two collaborators for its whole lifetime and nothing else,
    so concurrent handle() calls need no coordination.
    """

    email_validator: EmailValidator
    add_account: AddAccount

    def handle(self, request: SignUpRequest) -> HttpResponse:
        """
        Validate a sign-up request and create the account.

        Args:
            request: Unvalidated sign-up payload

        Returns:
            HttpResponse with 200 and the Account, 400 and a
            MissingParamError/InvalidParamError, or 500 and a ServerError.
            Never raises for collaborator failures.
        """
        for attribute, param_name in REQUIRED_FIELDS:
            if not getattr(request, attribute):
                return bad_request(MissingParamError(param_name))

        if request.password != request.password_confirmation:
            return bad_request(InvalidParamError("passwordConfirmation"))

        try:
            if not self.email_validator.is_valid(request.email):
                return bad_request(InvalidParamError("email"))

            account = self.add_account.add(
                AddAccountInput(
                    name=request.name,
                    email=request.email,
                    password=request.password,
                )
            )
        except Exception:
            return server_error()

        return ok(account)
