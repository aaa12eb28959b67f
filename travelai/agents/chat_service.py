# agents/chat_service.py
"""
Chat Service
Session and message operations behind the HTTP layer:
- Create/list/rename sessions (new sessions get a welcome message)
- Send a message: persist, run the assistant, persist the reply
- Title generation after the first user message (best effort, retryable)
- Travel result lookups and their audit records
"""

from typing import Any, Dict, List, Optional, Tuple

from loguru import logger

from ..config import settings
from ..schemas import (
    AssistantResponse,
    ChatMessage,
    ChatSession,
    MessageRole,
    SessionSummary,
    TravelQuery,
    TravelResults,
    TravelSearchRecord,
    TravelSearchType,
    TravelType,
)
from ..interfaces.chat_store import ChatStore, MemoryChatStore, SessionNotFoundError
from ..interfaces.redis_chat_store import RedisChatStore
from ..interfaces.search_enrichment import SearchEnrichmentAdapter
from ..interfaces.travel_search import TravelSearchService
from ..llm.llm_client import LLMClient
from ..llm.title_generator import TitleGenerator
from .travel_assistant import TravelAssistant, RESOURCE_LINKS


DEFAULT_SESSION_TITLE = "New Chat"

WELCOME_MESSAGE = (
    "Hello! I'm your AI travel assistant. I can help you find hotels, flights, "
    "plan itineraries, and answer any travel questions you have. Where would you "
    "like to go or what can I help you with today?"
)


class InvalidMessageError(ValueError):
    """Message content is empty or whitespace only"""


class InvalidTitleError(ValueError):
    """Session title is empty or whitespace only"""


class ChatService:
    """Coordinates the store, the assistant and the title generator"""

    def __init__(
        self,
        store: ChatStore,
        assistant: TravelAssistant,
        title_generator: TitleGenerator,
        travel_search: TravelSearchService
    ):
        self.store = store
        self.assistant = assistant
        self.title_generator = title_generator
        self.travel_search = travel_search

    # ============================================
    # Sessions
    # ============================================

    async def create_session(
        self,
        title: Optional[str] = None,
        user_id: Optional[str] = None
    ) -> ChatSession:
        session = await self.store.create_session((title or "").strip() or DEFAULT_SESSION_TITLE, user_id)
        await self.store.append_message(session.id, WELCOME_MESSAGE, MessageRole.ASSISTANT)
        # re-read so updated_at reflects the welcome message
        return await self.get_session(session.id)

    async def list_sessions(self, user_id: Optional[str] = None) -> List[SessionSummary]:
        return await self.store.list_sessions_for_user(user_id)

    async def get_session(self, session_id: str) -> ChatSession:
        session = await self.store.get_session(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    async def rename_session(self, session_id: str, title: str) -> ChatSession:
        title = (title or "").strip()
        if not title:
            raise InvalidTitleError("Title must not be empty")
        return await self.store.rename_session(session_id, title)

    async def list_messages(self, session_id: str) -> List[ChatMessage]:
        await self.get_session(session_id)
        return await self.store.list_messages(session_id)

    async def list_travel_searches(self, session_id: str) -> List[TravelSearchRecord]:
        await self.get_session(session_id)
        return await self.store.list_travel_searches(session_id)

    # ============================================
    # Messages
    # ============================================

    async def send_message(self, session_id: str, content: str) -> Tuple[ChatMessage, ChatMessage]:
        """
        Persist the user message, generate and persist the reply.

        Raises:
            InvalidMessageError: empty content (nothing is persisted)
            SessionNotFoundError: unknown session (nothing is persisted)
        """
        if not content or not content.strip():
            raise InvalidMessageError("Message content must not be empty")
        await self.get_session(session_id)

        user_message = await self.store.append_message(session_id, content, MessageRole.USER)

        messages = await self.store.list_messages(session_id)
        history = [m for m in messages if m.id != user_message.id][-settings.HISTORY_WINDOW:]

        response = await self.assistant.respond(content, history)
        metadata = await self._build_metadata(session_id, response)

        assistant_message = await self.store.append_message(
            session_id,
            response.message,
            MessageRole.ASSISTANT,
            metadata
        )

        user_count = sum(1 for m in messages if m.is_user)
        if user_count == 1:
            await self._update_title(session_id, content)

        logger.info(f"Processed message for session {session_id} (user messages: {user_count})")
        return user_message, assistant_message

    async def _build_metadata(self, session_id: str, response: AssistantResponse) -> Optional[Dict[str, Any]]:
        metadata: Dict[str, Any] = {}

        query = response.travel_query
        if query is not None:
            data: Dict[str, Any] = {}
            if response.should_search_travel and query.type != TravelType.MIXED:
                data = await self._run_travel_search(session_id, query)

            metadata["travel_results"] = {
                "type": query.type.value,
                "query": query.model_dump(mode="json", exclude_none=True),
                "data": data
            }

        if response.search_results is not None:
            metadata["sources"] = [
                {"title": r.title, "link": r.link}
                for r in response.search_results.web_results.organic_results[:RESOURCE_LINKS]
            ]

        return metadata or None

    async def _run_travel_search(self, session_id: str, query: TravelQuery) -> Dict[str, Any]:
        try:
            results = await self.travel_search.search(query)
        except Exception as e:
            logger.warning(f"Travel search failed for session {session_id}: {e}")
            return {}

        data = results.model_dump(mode="json", exclude_none=True)
        await self.store.record_travel_search(
            session_id,
            TravelSearchType(query.type.value),
            query.model_dump(mode="json", exclude_none=True),
            data
        )
        return data

    # ============================================
    # Titles
    # ============================================

    async def _update_title(self, session_id: str, first_message: str):
        """Best effort: a failure never fails the send"""
        try:
            title = await self.title_generator.generate(first_message)
            await self.store.rename_session(session_id, title)
            logger.info(f"Session {session_id} titled '{title}'")
        except Exception as e:
            logger.warning(f"Title update failed for session {session_id}: {e}")

    async def regenerate_title(self, session_id: str) -> ChatSession:
        """Retry title generation from the first user message"""
        session = await self.get_session(session_id)
        messages = await self.store.list_messages(session_id)
        first = next((m for m in messages if m.is_user), None)
        if first is None:
            return session

        title = await self.title_generator.generate(first.content)
        return await self.store.rename_session(session_id, title)

    # ============================================
    # Travel results
    # ============================================

    async def search_travel(self, query: TravelQuery) -> TravelResults:
        return await self.travel_search.search(query)

    async def close(self):
        await self.store.close()


# ============================================
# Service wiring
# ============================================

def build_store() -> ChatStore:
    if settings.STORE_BACKEND.lower() == "redis":
        return RedisChatStore.from_url(settings.REDIS_URL)
    return MemoryChatStore()


def build_chat_service(store: Optional[ChatStore] = None) -> ChatService:
    llm = LLMClient()
    return ChatService(
        store=store or build_store(),
        assistant=TravelAssistant(llm, SearchEnrichmentAdapter()),
        title_generator=TitleGenerator(llm),
        travel_search=TravelSearchService()
    )


_chat_service_instance: Optional[ChatService] = None


def get_chat_service() -> ChatService:
    """Get or create the chat service singleton"""
    global _chat_service_instance
    if _chat_service_instance is None:
        _chat_service_instance = build_chat_service()
    return _chat_service_instance


async def shutdown_chat_service():
    global _chat_service_instance
    if _chat_service_instance is not None:
        await _chat_service_instance.close()
        _chat_service_instance = None
