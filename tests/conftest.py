"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Mocked user handlers answering every operation with 200
- Settings cache isolation
"""

from collections.abc import Generator
from unittest.mock import MagicMock

import pytest
from fastapi.responses import JSONResponse

from usergate.config.settings import get_settings
from usergate.domain.ports import UserHandlers


@pytest.fixture
def handlers() -> MagicMock:
    """UserHandlers mock whose operations all return 200 {"ok": true}."""
    mock_handlers = MagicMock(spec=UserHandlers)
    for operation in ("register", "login", "set_avatar", "delete_users", "get_transaction_detail"):
        getattr(mock_handlers, operation).return_value = JSONResponse({"ok": True})
    return mock_handlers


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings so environment overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
