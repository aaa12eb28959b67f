"""
Chat Store - Persists sessions, messages and travel search audit records

The store is passed explicitly to the services that use it so the in-memory
implementation can be swapped for a durable one (see redis_chat_store.py).
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Any

from loguru import logger

from ..schemas import (
    ChatSession,
    SessionSummary,
    ChatMessage,
    MessageRole,
    TravelSearchRecord,
    TravelSearchType,
)
from ..schemas.chat_schemas import utc_now


class SessionNotFoundError(LookupError):
    """Raised when an operation references a session that does not exist"""

    def __init__(self, session_id: str):
        super().__init__(f"Session {session_id} not found")
        self.session_id = session_id


class ChatStore(ABC):
    """
    Session/message persistence contract.

    Messages are append-only: there is no update or delete path. Appending a
    message bumps the owning session's updated_at.
    """

    @abstractmethod
    async def create_session(self, title: str, user_id: Optional[str] = None) -> ChatSession:
        ...

    @abstractmethod
    async def get_session(self, session_id: str) -> Optional[ChatSession]:
        ...

    @abstractmethod
    async def list_sessions_for_user(self, user_id: Optional[str]) -> List[SessionSummary]:
        """Sessions owned by user_id, most recently updated first"""
        ...

    @abstractmethod
    async def rename_session(self, session_id: str, title: str) -> ChatSession:
        ...

    @abstractmethod
    async def append_message(
        self,
        session_id: str,
        content: str,
        role: MessageRole,
        metadata: Optional[Dict[str, Any]] = None
    ) -> ChatMessage:
        ...

    @abstractmethod
    async def list_messages(self, session_id: str) -> List[ChatMessage]:
        """Messages of a session in creation order"""
        ...

    @abstractmethod
    async def record_travel_search(
        self,
        session_id: str,
        search_type: TravelSearchType,
        query: Dict[str, Any],
        results: Optional[Dict[str, Any]] = None
    ) -> TravelSearchRecord:
        ...

    @abstractmethod
    async def list_travel_searches(self, session_id: str) -> List[TravelSearchRecord]:
        """Travel search audit records, newest first"""
        ...

    async def close(self):
        """Release any connection held by the store"""
        return None


class MemoryChatStore(ChatStore):
    """
    In-memory store.

    Every method runs to completion without awaiting, so the event loop
    serializes concurrent appends to the same session.
    """

    def __init__(self):
        self.sessions: Dict[str, ChatSession] = {}
        self.messages: Dict[str, List[ChatMessage]] = {}
        self.travel_searches: Dict[str, List[TravelSearchRecord]] = {}

    def _require_session(self, session_id: str) -> ChatSession:
        session = self.sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    async def create_session(self, title: str, user_id: Optional[str] = None) -> ChatSession:
        session = ChatSession(title=title, user_id=user_id)
        self.sessions[session.id] = session
        self.messages[session.id] = []
        self.travel_searches[session.id] = []
        logger.info(f"Created chat session: {session.id}")
        return session

    async def get_session(self, session_id: str) -> Optional[ChatSession]:
        return self.sessions.get(session_id)

    async def list_sessions_for_user(self, user_id: Optional[str]) -> List[SessionSummary]:
        owned = [s for s in self.sessions.values() if s.user_id == user_id]
        owned.sort(key=lambda s: s.updated_at, reverse=True)
        return [
            SessionSummary(**s.model_dump(), message_count=len(self.messages.get(s.id, [])))
            for s in owned
        ]

    async def rename_session(self, session_id: str, title: str) -> ChatSession:
        session = self._require_session(session_id)
        updated = session.model_copy(update={"title": title, "updated_at": utc_now()})
        self.sessions[session_id] = updated
        return updated

    async def append_message(
        self,
        session_id: str,
        content: str,
        role: MessageRole,
        metadata: Optional[Dict[str, Any]] = None
    ) -> ChatMessage:
        session = self._require_session(session_id)

        message = ChatMessage(
            session_id=session_id,
            content=content,
            role=role,
            metadata=metadata
        )
        self.messages[session_id].append(message)
        self.sessions[session_id] = session.model_copy(update={"updated_at": message.created_at})

        logger.debug(f"Saved {role.value} message to memory: session={session_id}")
        return message

    async def list_messages(self, session_id: str) -> List[ChatMessage]:
        # list order is append order, which is creation order
        return list(self.messages.get(session_id, []))

    async def record_travel_search(
        self,
        session_id: str,
        search_type: TravelSearchType,
        query: Dict[str, Any],
        results: Optional[Dict[str, Any]] = None
    ) -> TravelSearchRecord:
        self._require_session(session_id)
        record = TravelSearchRecord(
            session_id=session_id,
            search_type=search_type,
            query=query,
            results=results
        )
        self.travel_searches[session_id].append(record)
        return record

    async def list_travel_searches(self, session_id: str) -> List[TravelSearchRecord]:
        return list(reversed(self.travel_searches.get(session_id, [])))
