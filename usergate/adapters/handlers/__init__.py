"""User handler adapters - Business logic implementations."""

from .stub import NotImplementedUserHandlers

__all__ = ["NotImplementedUserHandlers"]
