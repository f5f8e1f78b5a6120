"""
Domain layer - Request admission rules with zero framework imports.

This package defines the declarative field rules, the interpreter that
evaluates them, and the port through which validated requests reach the
user-management business handlers.
"""

from .exceptions import UserGateError, ValidationFailed
from .ports import UserHandlers, ValidatedRequest
from .rules import (
    FieldError,
    FieldRule,
    IsArrayMinSize,
    IsEmail,
    Location,
    MinLength,
    NonEmpty,
    body,
    param,
)
from .validation import check, evaluate

__all__ = [
    "FieldError",
    "FieldRule",
    "IsArrayMinSize",
    "IsEmail",
    "Location",
    "MinLength",
    "NonEmpty",
    "UserGateError",
    "UserHandlers",
    "ValidatedRequest",
    "ValidationFailed",
    "body",
    "check",
    "evaluate",
    "param",
]
