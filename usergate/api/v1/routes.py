"""
API v1 routes.

Route table of the user-management API. Each route runs its validation
gate first, then hands the validated request to the matching business
handler:

- POST /register          username, email, password
- POST /login             email, password
- POST /setAvatar/{id}    avatar for user id
- POST /deleteUsers       userIds
- GET  /transaction/{id}  transaction id
"""

from typing import Any

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

import usergate.api.convertors  # noqa: F401  registers the "segment" convertor
from usergate.api.dependencies import get_user_handlers
from usergate.api.gate import ValidationGateRoute, validate
from usergate.api.models import (
    AvatarBody,
    DeleteUsersBody,
    LoginBody,
    RegisterBody,
    ValidationErrorResponse,
)
from usergate.domain.ports import UserHandlers, ValidatedRequest
from usergate.domain.rules import IsArrayMinSize, IsEmail, MinLength, NonEmpty, body, param

REGISTER_RULES = (
    body("username", NonEmpty(), "Username is required"),
    body("email", IsEmail(), "Invalid email"),
    body("password", MinLength(6), "Password must be at least 6 characters long"),
)

LOGIN_RULES = (
    body("email", IsEmail(), "Invalid email"),
    body("password", NonEmpty(), "Password is required"),
)

SET_AVATAR_RULES = (
    param("id", NonEmpty(), "User ID is required"),
    body("avatar", NonEmpty(), "Avatar URL is required"),
)

DELETE_USERS_RULES = (
    body("userIds", IsArrayMinSize(1), "At least one user ID is required"),
)

TRANSACTION_DETAIL_RULES = (
    param("id", NonEmpty(), "Transaction ID is required"),
)

router = APIRouter(tags=["v1"], route_class=ValidationGateRoute)

_validation_error: dict[int | str, dict[str, Any]] = {
    400: {"model": ValidationErrorResponse, "description": "Validation failed"},
}


def json_body(model: type[BaseModel]) -> dict[str, Any]:
    """OpenAPI requestBody for a JSON body checked by the gate rather than by FastAPI."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


@router.post(
    "/register",
    responses=_validation_error,
    openapi_extra=json_body(RegisterBody),
    summary="Register a new user",
)
async def register(
    data: ValidatedRequest = Depends(validate(*REGISTER_RULES)),
    handlers: UserHandlers = Depends(get_user_handlers),
) -> Response:
    """
    Register a new user.

    - **username**: Non-empty user name
    - **email**: Valid email address
    - **password**: Password (minimum 6 characters)
    """
    return await handlers.register(data)


@router.post(
    "/login",
    responses=_validation_error,
    openapi_extra=json_body(LoginBody),
    summary="Log in with email and password",
)
async def login(
    data: ValidatedRequest = Depends(validate(*LOGIN_RULES)),
    handlers: UserHandlers = Depends(get_user_handlers),
) -> Response:
    """
    Log in an existing user.

    - **email**: Valid email address
    - **password**: Non-empty password
    """
    return await handlers.login(data)


@router.post(
    "/setAvatar/{id:segment}",
    responses=_validation_error,
    openapi_extra=json_body(AvatarBody),
    summary="Set a user's avatar",
)
async def set_avatar(
    data: ValidatedRequest = Depends(validate(*SET_AVATAR_RULES)),
    handlers: UserHandlers = Depends(get_user_handlers),
) -> Response:
    """
    Set the avatar of a user.

    - **id**: User ID (path)
    - **avatar**: Non-empty avatar URL
    """
    return await handlers.set_avatar(data)


@router.post(
    "/deleteUsers",
    responses=_validation_error,
    openapi_extra=json_body(DeleteUsersBody),
    summary="Delete several users",
)
async def delete_users(
    data: ValidatedRequest = Depends(validate(*DELETE_USERS_RULES)),
    handlers: UserHandlers = Depends(get_user_handlers),
) -> Response:
    """
    Delete several users at once.

    - **userIds**: Array of at least one user ID
    """
    return await handlers.delete_users(data)


@router.get(
    "/transaction/{id:segment}",
    responses=_validation_error,
    summary="Fetch a single transaction",
)
async def get_transaction_detail(
    data: ValidatedRequest = Depends(validate(*TRANSACTION_DETAIL_RULES)),
    handlers: UserHandlers = Depends(get_user_handlers),
) -> Response:
    """
    Fetch a single transaction.

    - **id**: Transaction ID (path)
    """
    return await handlers.get_transaction_detail(data)
