"""
Presentation errors - Response-body error kinds for the sign-up boundary.

These errors double as response payloads: the controller places an instance
in the HttpResponse body instead of raising it. Two errors compare equal when
they are the same kind and name the same parameter.
"""


class SignUpError(Exception):
    """Base class for sign-up response errors."""

    def __init__(self, message: str, param_name: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.param_name = param_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SignUpError):
            return NotImplemented
        return type(self) is type(other) and self.param_name == other.param_name

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.param_name))

    def __repr__(self) -> str:
        if self.param_name is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.param_name!r})"


class MissingParamError(SignUpError):
    """A required request field is absent or empty."""

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Missing param: {param_name}", param_name)


class InvalidParamError(SignUpError):
    """A request field is present but its value is rejected."""

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Invalid param: {param_name}", param_name)


class ServerError(SignUpError):
    """Unexpected internal failure. Never carries the underlying cause."""

    def __init__(self) -> None:
        super().__init__("Internal server error")
