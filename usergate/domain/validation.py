"""
Validation interpreter - Evaluates field rules against a request.

Evaluation is fan-out/join: every rule runs as its own coroutine, the
interpreter waits for all of them, then aggregates the failures. There is
no short-circuit on the first failure, so the error list is always
complete and comes back in rule declaration order.
"""

import asyncio
from collections.abc import Iterable
from typing import Any

from email_validator import EmailNotValidError, validate_email

from .ports import ValidatedRequest
from .rules import (
    Constraint,
    FieldError,
    FieldRule,
    IsArrayMinSize,
    IsEmail,
    Location,
    MinLength,
    NonEmpty,
)


def check(constraint: Constraint, value: Any) -> bool:
    """
    Interpret one constraint against a raw value.

    Missing values arrive as None and fail every constraint.
    """
    if isinstance(constraint, NonEmpty):
        return _is_non_empty(value)
    if isinstance(constraint, IsEmail):
        return _is_email(value)
    if isinstance(constraint, MinLength):
        text = _as_text(value)
        return text is not None and len(text) >= constraint.min_length
    if isinstance(constraint, IsArrayMinSize):
        if not isinstance(value, list):
            return False
        if len(value) < constraint.min_size:
            return False
        return constraint.max_size is None or len(value) <= constraint.max_size
    raise TypeError(f"Unknown constraint: {constraint!r}")


def read_value(rule: FieldRule, request: ValidatedRequest) -> Any:
    """Look up the value a rule applies to, or None when absent."""
    if rule.location == Location.PARAMS:
        return request.path_params.get(rule.field)
    return request.body.get(rule.field)


async def evaluate(rules: Iterable[FieldRule], request: ValidatedRequest) -> list[FieldError]:
    """
    Run every rule concurrently and collect the failures.

    Args:
        rules: Field rules bound to the matched route
        request: Body and path parameters of the inbound request

    Returns:
        One FieldError per failing rule, in rule order. Empty when the
        request is admissible.
    """
    outcomes = await asyncio.gather(*(_run_rule(rule, request) for rule in rules))
    return [error for error in outcomes if error is not None]


async def _run_rule(rule: FieldRule, request: ValidatedRequest) -> FieldError | None:
    value = read_value(rule, request)
    if check(rule.constraint, value):
        return None
    return FieldError(field=rule.field, location=rule.location, message=rule.message, value=value)


def _is_non_empty(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (str, list, dict)):
        return len(value) > 0
    return True


def _is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _as_text(value: Any) -> str | None:
    # bool is an int subclass but has no meaningful length
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    return None
