"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Sign-up fields are all optional here: presence and content checks belong
to the SignUpController, which reports them as 400 responses.
"""

from pydantic import BaseModel, ConfigDict, Field


class SignUpRequestBody(BaseModel):
    """Request model for account sign-up."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    email: str | None = None
    password: str | None = None
    password_confirmation: str | None = Field(
        default=None,
        alias="passwordConfirmation",
        description="Must match password",
    )


class AccountResponse(BaseModel):
    """Response model for a created account. The password hash is never exposed."""

    id: str
    name: str
    email: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
