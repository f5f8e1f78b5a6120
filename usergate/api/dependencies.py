"""
FastAPI dependencies - Dependency injection factories.

This module resolves the business handlers by name and provides the
Depends() factory that hands them to the routes.
"""

import importlib
import logging

from fastapi import Request

from usergate.adapters.handlers.stub import NotImplementedUserHandlers
from usergate.domain.ports import UserHandlers

logger = logging.getLogger(__name__)


def load_user_handlers(target: str) -> UserHandlers:
    """
    Resolve the user handlers from a ``"package.module:attribute"`` name.

    A class or factory found at that name is called with no arguments;
    any other object is used as is. An empty name selects the 501 stubs.

    Args:
        target: Import path of the handlers, usually from settings

    Returns:
        Object implementing the UserHandlers protocol

    Raises:
        ValueError: If the name is malformed or does not resolve
    """
    target = target.strip()
    if not target:
        logger.warning("No user handlers configured, using 501 stubs")
        return NotImplementedUserHandlers()

    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        raise ValueError(f"User handlers must be 'package.module:attribute', got {target!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ValueError(f"Cannot import user handlers module {module_name!r}") from exc

    try:
        handlers = getattr(module, attribute)
    except AttributeError:
        raise ValueError(f"Module {module_name!r} has no attribute {attribute!r}") from None

    if callable(handlers):
        handlers = handlers()

    logger.info("Loaded user handlers from %s", target)
    return handlers


def get_user_handlers(request: Request) -> UserHandlers:
    """
    Get user handlers from app state.

    The handlers are loaded during app lifespan startup and stored in app.state.
    """
    return request.app.state.user_handlers
