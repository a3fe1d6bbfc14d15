"""
API v1 routes.

Defines REST endpoints for the SignUp API.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.api.dependencies import get_signup_controller
from src.api.models import AccountResponse, ErrorResponse, SignUpRequestBody
from src.domain.models import Account
from src.presentation.http import HttpResponse, SignUpRequest
from src.presentation.signup import SignUpController

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])


@router.post(
    "/signup",
    response_model=AccountResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid parameter"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Sign up a new account",
    description="Submit name, email, password and passwordConfirmation to create an account.",
)
def signup(
    request_data: SignUpRequestBody,
    controller: SignUpController = Depends(get_signup_controller),
) -> JSONResponse:
    """
    Create a new account.

    - **name**: Display name
    - **email**: Email address
    - **password**: Password
    - **passwordConfirmation**: Same value as password

    Returns the created account (without its password) on success.
    """
    response = controller.handle(
        SignUpRequest(
            name=request_data.name,
            email=request_data.email,
            password=request_data.password,
            password_confirmation=request_data.password_confirmation,
        )
    )
    if response.status_code >= 500:
        logger.warning("Sign-up failed with status %d", response.status_code)
    return to_json_response(response)


def to_json_response(response: HttpResponse) -> JSONResponse:
    """Serialize a controller HttpResponse onto the wire."""
    if isinstance(response.body, Account):
        content = AccountResponse(
            id=response.body.id,
            name=response.body.name,
            email=response.body.email,
        ).model_dump()
    else:
        content = ErrorResponse(detail=response.body.message).model_dump()
    return JSONResponse(status_code=response.status_code, content=content)
