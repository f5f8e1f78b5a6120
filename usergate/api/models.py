"""
API request and response models.

Pydantic models for OpenAPI schema generation.
Request bodies and error bodies are produced by the validation gate, not by
these models: they only document the JSON shapes.
"""

from typing import Any

from pydantic import BaseModel, EmailStr, Field


class RegisterBody(BaseModel):
    """Body of POST /register."""

    username: str
    email: EmailStr
    password: str = Field(..., min_length=6, description="User password (min 6 characters)")


class LoginBody(BaseModel):
    """Body of POST /login."""

    email: EmailStr
    password: str


class AvatarBody(BaseModel):
    """Body of POST /setAvatar/{id}."""

    avatar: str = Field(..., description="Avatar image URL")


class DeleteUsersBody(BaseModel):
    """Body of POST /deleteUsers."""

    userIds: list[str] = Field(..., min_length=1, description="IDs of the users to delete")


class FieldErrorItem(BaseModel):
    """One failed field rule."""

    type: str = "field"
    field: str
    location: str
    message: str
    value: Any = None


class ValidationErrorResponse(BaseModel):
    """Body of every 400 response produced by the validation gate."""

    errors: list[FieldErrorItem]

