"""
Unit tests for handler wiring.

Tests load_user_handlers name resolution and get_user_handlers.
"""

from unittest.mock import MagicMock

import pytest

from usergate.adapters.handlers.stub import NotImplementedUserHandlers
from usergate.api.dependencies import get_user_handlers, load_user_handlers


class RecordingHandlers:
    """Handlers class resolvable by name from this module."""

    instances = 0

    def __init__(self) -> None:
        RecordingHandlers.instances += 1


def build_handlers() -> RecordingHandlers:
    return RecordingHandlers()


prebuilt_handlers = RecordingHandlers()


class TestLoadUserHandlers:
    """Tests for resolving handlers by import path."""

    @pytest.mark.parametrize("target", ["", "   "])
    def test_empty_name_selects_stub(self, target: str) -> None:
        """No configured handlers falls back to the 501 stubs."""
        assert isinstance(load_user_handlers(target), NotImplementedUserHandlers)

    def test_class_is_instantiated(self) -> None:
        """A class name yields a fresh instance."""
        handlers = load_user_handlers(f"{__name__}:RecordingHandlers")
        assert isinstance(handlers, RecordingHandlers)

    def test_factory_is_called(self) -> None:
        """A factory function is called with no arguments."""
        handlers = load_user_handlers(f"{__name__}:build_handlers")
        assert isinstance(handlers, RecordingHandlers)

    def test_instance_is_used_as_is(self) -> None:
        """A ready object is returned unchanged."""
        assert load_user_handlers(f"{__name__}:prebuilt_handlers") is prebuilt_handlers

    def test_stub_by_name(self) -> None:
        """The stub adapter itself can be named explicitly."""
        handlers = load_user_handlers("usergate.adapters.handlers.stub:NotImplementedUserHandlers")
        assert isinstance(handlers, NotImplementedUserHandlers)

    @pytest.mark.parametrize("target", ["usergate.adapters.handlers.stub", ":Handlers", "module:"])
    def test_malformed_name_rejected(self, target: str) -> None:
        """Names without both module and attribute are rejected."""
        with pytest.raises(ValueError, match="package.module:attribute"):
            load_user_handlers(target)

    def test_unknown_module_rejected(self) -> None:
        """Unimportable module raises ValueError."""
        with pytest.raises(ValueError, match="Cannot import"):
            load_user_handlers("usergate.no_such_module:Handlers")

    def test_unknown_attribute_rejected(self) -> None:
        """Missing attribute raises ValueError."""
        with pytest.raises(ValueError, match="has no attribute"):
            load_user_handlers("usergate.adapters.handlers.stub:Missing")


class TestGetUserHandlers:
    """Tests for the handlers dependency."""

    def test_returns_handlers_from_app_state(self) -> None:
        """Handlers come from app.state set during lifespan."""
        handlers = NotImplementedUserHandlers()
        request = MagicMock()
        request.app.state.user_handlers = handlers

        assert get_user_handlers(request) is handlers
