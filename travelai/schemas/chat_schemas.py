# schemas/chat_schemas.py
"""
Pydantic v2 schemas for the TravelAI chat service
Covers sessions, messages, travel intent, search enrichment and the
travel-result contract rendered by the web client
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, List, Dict, Any

from pydantic import BaseModel, Field, computed_field, field_validator


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


# ============================================
# Enums
# ============================================

class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class TravelType(str, Enum):
    HOTELS = "hotels"
    FLIGHTS = "flights"
    ACTIVITIES = "activities"
    MIXED = "mixed"


class TravelSearchType(str, Enum):
    """Types a travel search can be recorded under (no 'mixed')"""
    HOTELS = "hotels"
    FLIGHTS = "flights"
    ACTIVITIES = "activities"


# ============================================
# Travel Intent
# ============================================

class TravelQuery(BaseModel):
    """Structured travel intent extracted from free text"""
    destination: Optional[str] = None
    type: TravelType = TravelType.MIXED
    dates: Optional[str] = None
    guests: Optional[str] = None
    budget: Optional[str] = None
    origin: Optional[str] = None  # flights only


# ============================================
# Sessions & Messages
# ============================================

class ChatSession(BaseModel):
    """A persisted conversation thread"""
    id: str = Field(default_factory=new_id)
    title: str = Field(..., min_length=1)
    user_id: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class SessionSummary(ChatSession):
    """Session annotated with its message count (sidebar listing)"""
    message_count: int = 0


class ChatMessage(BaseModel):
    """Single immutable chat message"""
    id: str = Field(default_factory=new_id)
    session_id: str
    content: str
    role: MessageRole
    metadata: Optional[Dict[str, Any]] = None
    created_at: datetime = Field(default_factory=utc_now)

    @computed_field
    @property
    def travel_results(self) -> Optional[Dict[str, Any]]:
        if not self.metadata:
            return None
        return self.metadata.get("travel_results")

    @property
    def is_user(self) -> bool:
        return self.role == MessageRole.USER


class TravelSearchRecord(BaseModel):
    """Write-once audit record of a travel search"""
    id: str = Field(default_factory=new_id)
    session_id: str
    search_type: TravelSearchType
    query: Dict[str, Any]
    results: Optional[Dict[str, Any]] = None
    created_at: datetime = Field(default_factory=utc_now)


class ChatTurn(BaseModel):
    """One role/content turn sent to the model"""
    role: MessageRole
    content: str


# ============================================
# Search Enrichment
# ============================================

class SearchResult(BaseModel):
    """Normalized search hit"""
    title: str = ""
    link: str = ""
    snippet: str = ""
    position: Optional[int] = None
    displayed_link: Optional[str] = None


class SearchParameters(BaseModel):
    query: str
    type: str  # web_search | news_search | image_search
    location: Optional[str] = None


class SearchResponse(BaseModel):
    """Result of a single sub-search"""
    search_parameters: SearchParameters
    organic_results: List[SearchResult] = Field(default_factory=list)
    related_searches: List[str] = Field(default_factory=list)
    summary: str


class EnrichmentResult(BaseModel):
    """Joined result of the enrichment fan-out"""
    web_results: SearchResponse
    news_results: Optional[SearchResponse] = None
    image_results: Optional[SearchResponse] = None


# ============================================
# Assistant Response
# ============================================

class AssistantResponse(BaseModel):
    """Output of the response-orchestration pipeline"""
    message: str
    should_search_travel: bool = False
    travel_query: Optional[TravelQuery] = None
    search_results: Optional[EnrichmentResult] = None


# ============================================
# Travel Results (client rendering contract)
# ============================================

class HotelResult(BaseModel):
    id: str
    name: str
    rating: float
    review_count: int
    price_per_night: float
    currency: str
    image_url: str
    location: str
    amenities: List[str] = Field(default_factory=list)
    description: str = ""


class FlightLeg(BaseModel):
    airport: str
    time: str
    date: str


class FlightResult(BaseModel):
    id: str
    airline: str
    departure: FlightLeg
    arrival: FlightLeg
    duration: str
    price: float
    currency: str
    stops: int = 0


class ActivityResult(BaseModel):
    id: str
    title: str
    description: str = ""
    price: float
    currency: str
    rating: float
    review_count: int
    image_url: str
    duration: str
    category: str


class TravelResults(BaseModel):
    """Only the list matching the query type is populated"""
    hotels: Optional[List[HotelResult]] = None
    flights: Optional[List[FlightResult]] = None
    activities: Optional[List[ActivityResult]] = None


# ============================================
# API Request/Response Models
# ============================================

class CreateSessionRequest(BaseModel):
    title: Optional[str] = Field(None, max_length=200)


class RenameSessionRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value


class SendMessageRequest(BaseModel):
    content: str = Field(..., description="User's message")


class SendMessageResponse(BaseModel):
    user_message: ChatMessage
    assistant_message: ChatMessage
