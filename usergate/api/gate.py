"""
Validation gate - Per-route request admission for FastAPI.

Routes declare their field rules with ``Depends(validate(*rules))``. The
dependency evaluates every rule and either hands the endpoint the request
data or raises ValidationFailed. Routers built with ``ValidationGateRoute``
turn that exception into the uniform 400 response, so the business handler
behind the endpoint is never called for a rejected request.

Per-request flow:
    Received -> Validating -> Rejected (400)
                           -> Dispatched (handler takes over)
"""

import json
import logging
from collections.abc import Awaitable, Callable, Coroutine
from typing import Any

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

from usergate.domain.exceptions import ValidationFailed
from usergate.domain.ports import ValidatedRequest
from usergate.domain.rules import FieldError, FieldRule
from usergate.domain.validation import evaluate

logger = logging.getLogger(__name__)

# Deeper values are reported as null instead of echoed back
MAX_ECHO_DEPTH = 32


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-finite number {name} in JSON body")


def is_json_content(content_type: str | None) -> bool:
    """True for ``application/json`` and ``+json`` media types."""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or (
        media_type.startswith("application/") and media_type.endswith("+json")
    )


async def read_request(request: Request) -> ValidatedRequest:
    """
    Capture the body and path parameters the rules are checked against.

    Only JSON content types are decoded. An absent, malformed, non-JSON,
    too deeply nested or non-object body reads as ``{}``: the field rules
    then report the missing fields instead of the request failing as a
    server error. ``NaN`` and ``Infinity`` literals count as malformed.
    """
    payload: Any = {}
    raw = await request.body()
    if raw and is_json_content(request.headers.get("content-type")):
        try:
            payload = json.loads(raw, parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            logger.debug("Unparseable JSON body on %s %s", request.method, request.url.path)
            payload = {}
    if not isinstance(payload, dict):
        payload = {}

    return ValidatedRequest(
        method=request.method,
        path=request.url.path,
        body=payload,
        path_params=dict(request.path_params),
    )


def exceeds_depth(value: Any, limit: int) -> bool:
    """True when lists or objects nest deeper than ``limit`` levels."""
    stack = [(value, 0)]
    while stack:
        item, depth = stack.pop()
        if isinstance(item, dict):
            children = list(item.values())
        elif isinstance(item, list):
            children = item
        else:
            continue
        if depth >= limit:
            return True
        stack.extend((child, depth + 1) for child in children)
    return False


def error_item(error: FieldError) -> dict[str, Any]:
    """Serialize one failure for the 400 body, dropping over-nested values."""
    item = error.as_dict()
    if exceeds_depth(item["value"], MAX_ECHO_DEPTH):
        item["value"] = None
    return item


def validate(*rules: FieldRule) -> Callable[[Request], Awaitable[ValidatedRequest]]:
    """
    Build a validation gate dependency for one route.

    Args:
        rules: Field rules the route requires, in reporting order

    Returns:
        FastAPI dependency resolving to the validated request data.
        Raises ValidationFailed carrying every failing rule.
    """

    async def gate(request: Request) -> ValidatedRequest:
        data = await read_request(request)
        errors = await evaluate(rules, data)
        if errors:
            raise ValidationFailed(errors)
        return data

    return gate


class ValidationGateRoute(APIRoute):
    """APIRoute that answers ValidationFailed with 400 and the full error list."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_route_handler = super().get_route_handler()

        async def gate_route_handler(request: Request) -> Response:
            try:
                return await original_route_handler(request)
            except ValidationFailed as exc:
                logger.info(
                    "Rejected %s %s: %s",
                    request.method,
                    request.url.path,
                    ", ".join(error.field for error in exc.errors),
                )
                content = {"errors": [error_item(error) for error in exc.errors]}
                return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)

        return gate_route_handler
