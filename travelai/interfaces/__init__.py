# interfaces/__init__.py
"""
Interfaces Package

Contains data stores and external data sources:
- chat_store: Session/message persistence (in-memory)
- redis_chat_store: Session/message persistence (Redis)
- search_enrichment: SerpAPI web/news/image search
- travel_search: Hotel/flight/activity result contract
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .chat_store import ChatStore, MemoryChatStore, SessionNotFoundError
    from .redis_chat_store import RedisChatStore
    from .search_enrichment import SearchEnrichmentAdapter, SearchError
    from .travel_search import TravelSearchService

__all__ = [
    "ChatStore",
    "MemoryChatStore",
    "SessionNotFoundError",
    "RedisChatStore",
    "SearchEnrichmentAdapter",
    "SearchError",
    "TravelSearchService"
]
