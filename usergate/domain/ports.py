"""
Port interfaces - Protocol definitions for the business handlers.

The route table only decides admissibility. Everything after that belongs
to the user handlers, which the application resolves by name at startup.
Adapters implement these protocols.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class ValidatedRequest:
    """
    Request data that passed the validation gate.

    Values are exactly what the client sent: the gate confirms presence
    and format, it never trims, coerces or normalizes.
    """

    method: str
    path: str
    body: Mapping[str, Any] = field(default_factory=dict)
    path_params: Mapping[str, str] = field(default_factory=dict)


class UserHandlers(Protocol):
    """
    Port interface for the user-management business logic.

    Each operation receives the validated request and returns the HTTP
    response to send. Any error it raises is its own and propagates
    unchanged.
    """

    async def register(self, request: ValidatedRequest) -> Any:
        """Create an account from username, email and password."""
        ...

    async def login(self, request: ValidatedRequest) -> Any:
        """Authenticate with email and password."""
        ...

    async def set_avatar(self, request: ValidatedRequest) -> Any:
        """Store the avatar URL for the user in path parameter ``id``."""
        ...

    async def delete_users(self, request: ValidatedRequest) -> Any:
        """Delete every user listed in ``userIds``."""
        ...

    async def get_transaction_detail(self, request: ValidatedRequest) -> Any:
        """Fetch the transaction in path parameter ``id``."""
        ...
