# agents/__init__.py
"""
Agents Package

Contains the chat-facing orchestration:
- TravelAssistant: Response pipeline (enrichment, generation, fallback)
- ChatService: Session/message operations and title updates
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .travel_assistant import TravelAssistant, ResponseStrategy, GenerativeStrategy, FallbackStrategy
    from .chat_service import ChatService, InvalidMessageError, get_chat_service

__all__ = [
    "TravelAssistant",
    "ResponseStrategy",
    "GenerativeStrategy",
    "FallbackStrategy",
    "ChatService",
    "InvalidMessageError",
    "get_chat_service"
]
