"""
Unit tests for API request/response models.

Tests the documentation body models and the 400 error envelope.
"""

import pytest
from pydantic import ValidationError

from usergate.api.gate import error_item
from usergate.api.models import (
    DeleteUsersBody,
    RegisterBody,
    ValidationErrorResponse,
)
from usergate.domain.rules import FieldError, Location


class TestRegisterBody:
    """Tests for RegisterBody model."""

    def test_valid_register_body(self) -> None:
        """Valid username, email and password are accepted."""
        model = RegisterBody(username="alice", email="alice@example.com", password="secret")
        assert model.password == "secret"

    def test_password_minimum_length_documented(self) -> None:
        """Schema advertises the 6 character minimum."""
        schema = RegisterBody.model_json_schema()
        assert schema["properties"]["password"]["minLength"] == 6
        assert schema["properties"]["email"]["format"] == "email"

    def test_short_password_rejected(self) -> None:
        """Model mirrors the gate's length rule."""
        with pytest.raises(ValidationError):
            RegisterBody(username="alice", email="alice@example.com", password="12345")


class TestDeleteUsersBody:
    """Tests for DeleteUsersBody model."""

    def test_schema_requires_one_id(self) -> None:
        """Schema advertises at least one user id."""
        schema = DeleteUsersBody.model_json_schema()
        assert schema["properties"]["userIds"]["minItems"] == 1


class TestValidationErrorResponse:
    """Tests for the documented 400 error envelope."""

    def test_envelope_matches_gate_output(self) -> None:
        """The gate's error items validate against the documented schema."""
        errors = [
            FieldError(field="id", location=Location.PARAMS, message="User ID is required", value=""),
            FieldError(field="avatar", location=Location.BODY, message="Avatar URL is required"),
        ]
        content = {"errors": [error_item(error) for error in errors]}

        response = ValidationErrorResponse.model_validate(content)

        assert response.model_dump() == content
