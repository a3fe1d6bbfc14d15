"""
Presentation layer - Transport-neutral controllers and their response shapes.
"""

from .errors import InvalidParamError, MissingParamError, ServerError, SignUpError
from .http import HttpResponse, SignUpRequest, bad_request, ok, server_error
from .signup import SignUpController

__all__ = [
    "HttpResponse",
    "InvalidParamError",
    "MissingParamError",
    "ServerError",
    "SignUpController",
    "SignUpError",
    "SignUpRequest",
    "bad_request",
    "ok",
    "server_error",
]
