"""
Domain exceptions - Semantic error types for request admission.

The validation gate raises exactly one kind of error. It is handled where
it is raised and never reaches a business handler.
"""

from .rules import FieldError


class UserGateError(Exception):
    """Base class for user gate domain errors."""

    pass


class ValidationFailed(UserGateError):
    """One or more field rules rejected the request."""

    def __init__(self, errors: list[FieldError] | tuple[FieldError, ...]) -> None:
        self.errors = tuple(errors)
        fields = ", ".join(error.field for error in self.errors)
        super().__init__(f"Validation failed: {fields}")
