# schemas/__init__.py
"""
Pydantic Schemas Package

Contains all Pydantic v2 models for:
- Sessions, messages and travel search audit records
- Travel intent and the assistant response
- Search enrichment results
- API requests/responses
"""

from .chat_schemas import (
    # Enums
    MessageRole, TravelType, TravelSearchType,
    # Intent
    TravelQuery,
    # Sessions & Messages
    ChatSession, SessionSummary, ChatMessage, TravelSearchRecord, ChatTurn,
    # Search
    SearchResult, SearchParameters, SearchResponse, EnrichmentResult,
    # Assistant
    AssistantResponse,
    # Travel results
    HotelResult, FlightLeg, FlightResult, ActivityResult, TravelResults,
    # API
    CreateSessionRequest, RenameSessionRequest, SendMessageRequest, SendMessageResponse,
)

__all__ = [
    "MessageRole", "TravelType", "TravelSearchType",
    "TravelQuery",
    "ChatSession", "SessionSummary", "ChatMessage", "TravelSearchRecord", "ChatTurn",
    "SearchResult", "SearchParameters", "SearchResponse", "EnrichmentResult",
    "AssistantResponse",
    "HotelResult", "FlightLeg", "FlightResult", "ActivityResult", "TravelResults",
    "CreateSessionRequest", "RenameSessionRequest", "SendMessageRequest", "SendMessageResponse",
]
