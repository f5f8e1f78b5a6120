"""
Field rules - Declarative per-field request constraints.

A route declares its admissibility as data: an ordered tuple of FieldRule
values, each naming where the value lives (body or path parameter), which
constraint it must satisfy, and the message reported when it does not.

Constraint variants:
- NonEmpty: value is present and not empty
- IsEmail: value is a syntactically valid email address
- MinLength(n): value has at least n characters
- IsArrayMinSize(n): value is an array with at least n elements

The variants carry no behaviour; domain.validation interprets them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Location(str, Enum):
    """Where a rule reads its value from."""

    BODY = "body"
    PARAMS = "params"


@dataclass(frozen=True)
class NonEmpty:
    """Value is present and not empty."""


@dataclass(frozen=True)
class IsEmail:
    """Value is a string holding a valid email address."""


@dataclass(frozen=True)
class MinLength:
    """Value has at least ``min_length`` characters."""

    min_length: int


@dataclass(frozen=True)
class IsArrayMinSize:
    """Value is an array of at least ``min_size`` (and at most ``max_size``) items."""

    min_size: int
    max_size: int | None = None


Constraint = NonEmpty | IsEmail | MinLength | IsArrayMinSize


@dataclass(frozen=True)
class FieldRule:
    """A single constraint on one request field, paired with its failure message."""

    location: Location
    field: str
    constraint: Constraint
    message: str


@dataclass(frozen=True)
class FieldError:
    """A failed FieldRule, as reported to the client."""

    field: str
    location: Location
    message: str
    value: Any = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "type": "field",
            "field": self.field,
            "location": self.location.value,
            "message": self.message,
            "value": self.value,
        }


def body(field: str, constraint: Constraint, message: str) -> FieldRule:
    """Rule on a JSON body field."""
    return FieldRule(Location.BODY, field, constraint, message)


def param(field: str, constraint: Constraint, message: str) -> FieldRule:
    """Rule on a path parameter."""
    return FieldRule(Location.PARAMS, field, constraint, message)
