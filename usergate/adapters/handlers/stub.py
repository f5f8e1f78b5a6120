"""
Stub user handlers adapter - Implements UserHandlers protocol.

This module provides a placeholder implementation of the domain's
user handlers port. Every operation answers 501 so the route table and
its validation can be exercised before real business logic is wired in.
"""

import logging

from starlette.responses import JSONResponse

from usergate.domain.ports import ValidatedRequest

logger = logging.getLogger(__name__)


class NotImplementedUserHandlers:
    """
    Implements UserHandlers protocol with 501 Not Implemented responses.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    async def register(self, request: ValidatedRequest) -> JSONResponse:
        return self._not_implemented("Registration", request)

    async def login(self, request: ValidatedRequest) -> JSONResponse:
        return self._not_implemented("Login", request)

    async def set_avatar(self, request: ValidatedRequest) -> JSONResponse:
        return self._not_implemented("Set avatar", request)

    async def delete_users(self, request: ValidatedRequest) -> JSONResponse:
        return self._not_implemented("Delete users", request)

    async def get_transaction_detail(self, request: ValidatedRequest) -> JSONResponse:
        return self._not_implemented("Transaction detail", request)

    def _not_implemented(self, operation: str, request: ValidatedRequest) -> JSONResponse:
        logger.warning("[STUB] %s %s: %s handler not configured", request.method, request.path, operation)
        return JSONResponse(
            status_code=501,
            content={"detail": f"{operation} not yet implemented"},
        )
