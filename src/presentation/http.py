"""
HTTP request/response shapes - Transport-neutral records for controllers.

The transport adapter builds a SignUpRequest from the wire payload and
serializes the HttpResponse back. Every controller outcome uses the same
HttpResponse shape, differing only in status code and body.
"""

from dataclasses import dataclass

from src.domain.models import Account

from .errors import ServerError, SignUpError


@dataclass(frozen=True)
class SignUpRequest:
    """Unvalidated sign-up payload. Presence is enforced by the controller."""

    name: str | None = None
    email: str | None = None
    password: str | None = None
    password_confirmation: str | None = None


@dataclass(frozen=True)
class HttpResponse:
    """Status code plus either an error or the created account."""

    status_code: int
    body: SignUpError | Account


def ok(body: Account) -> HttpResponse:
    return HttpResponse(status_code=200, body=body)


def bad_request(error: SignUpError) -> HttpResponse:
    return HttpResponse(status_code=400, body=error)


def server_error() -> HttpResponse:
    """500 with a fresh generic ServerError; callers never pass the cause."""
    return HttpResponse(status_code=500, body=ServerError())
