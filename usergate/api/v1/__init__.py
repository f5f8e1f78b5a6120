"""
API v1 package.

Contains the versioned route table for the user-management API.
"""

from usergate.api.v1.routes import router

__all__ = ["router"]
