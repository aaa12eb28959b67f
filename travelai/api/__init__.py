# api/__init__.py
"""
API Endpoints Package

Contains the FastAPI routers for the chat service:
- chat: Sessions, messages, titles and search audit records
- travel: Hotel/flight/activity result lookups
"""

from typing import TYPE_CHECKING

# Lazy imports to avoid circular dependencies
if TYPE_CHECKING:
    from .chat import router as chat_router
    from .travel import router as travel_router

__all__ = [
    "chat_router",
    "travel_router"
]
