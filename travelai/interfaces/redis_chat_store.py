"""
Redis Chat Store - Durable implementation of the chat store contract

Key layout:
    chat:session:{id}          JSON session record
    chat:messages:{id}         list of JSON messages (append order)
    chat:searches:{id}         list of JSON travel search records
    chat:user_sessions:{owner} sorted set of session ids scored by updated_at
"""

from typing import Dict, List, Optional, Any

import redis.asyncio as redis
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
from .chat_store import ChatStore, SessionNotFoundError

ANONYMOUS_OWNER = "anonymous"


class RedisChatStore(ChatStore):
    """Stores chat data in Redis. The client must use decode_responses=True."""

    def __init__(self, client: redis.Redis):
        self.redis_client = client

    @classmethod
    def from_url(cls, redis_url: str) -> "RedisChatStore":
        client = redis.from_url(
            redis_url,
            encoding="utf-8",
            decode_responses=True
        )
        logger.info(f"RedisChatStore using {redis_url}")
        return cls(client)

    # ---------- keys ----------

    @staticmethod
    def _session_key(session_id: str) -> str:
        return f"chat:session:{session_id}"

    @staticmethod
    def _messages_key(session_id: str) -> str:
        return f"chat:messages:{session_id}"

    @staticmethod
    def _searches_key(session_id: str) -> str:
        return f"chat:searches:{session_id}"

    @staticmethod
    def _owner_key(user_id: Optional[str]) -> str:
        return f"chat:user_sessions:{user_id or ANONYMOUS_OWNER}"

    # ---------- helpers ----------

    async def _save_session(self, session: ChatSession):
        await self.redis_client.set(self._session_key(session.id), session.model_dump_json())
        await self.redis_client.zadd(
            self._owner_key(session.user_id),
            {session.id: session.updated_at.timestamp()}
        )

    async def _require_session(self, session_id: str) -> ChatSession:
        session = await self.get_session(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    # ---------- sessions ----------

    async def create_session(self, title: str, user_id: Optional[str] = None) -> ChatSession:
        session = ChatSession(title=title, user_id=user_id)
        await self._save_session(session)
        logger.info(f"Created chat session: {session.id}")
        return session

    async def get_session(self, session_id: str) -> Optional[ChatSession]:
        data = await self.redis_client.get(self._session_key(session_id))
        if not data:
            return None
        return ChatSession.model_validate_json(data)

    async def list_sessions_for_user(self, user_id: Optional[str]) -> List[SessionSummary]:
        session_ids = await self.redis_client.zrevrange(self._owner_key(user_id), 0, -1)

        summaries = []
        for session_id in session_ids:
            session = await self.get_session(session_id)
            if session is None or session.user_id != user_id:
                continue
            count = await self.redis_client.llen(self._messages_key(session_id))
            summaries.append(SessionSummary(**session.model_dump(), message_count=count))

        summaries.sort(key=lambda s: s.updated_at, reverse=True)
        return summaries

    async def rename_session(self, session_id: str, title: str) -> ChatSession:
        session = await self._require_session(session_id)
        updated = session.model_copy(update={"title": title, "updated_at": utc_now()})
        await self._save_session(updated)
        return updated

    # ---------- messages ----------

    async def append_message(
        self,
        session_id: str,
        content: str,
        role: MessageRole,
        metadata: Optional[Dict[str, Any]] = None
    ) -> ChatMessage:
        session = await self._require_session(session_id)

        message = ChatMessage(
            session_id=session_id,
            content=content,
            role=role,
            metadata=metadata
        )
        await self.redis_client.rpush(self._messages_key(session_id), message.model_dump_json())
        await self._save_session(session.model_copy(update={"updated_at": message.created_at}))

        logger.debug(f"Saved {role.value} message to Redis: session={session_id}")
        return message

    async def list_messages(self, session_id: str) -> List[ChatMessage]:
        raw_messages = await self.redis_client.lrange(self._messages_key(session_id), 0, -1)
        # travel_results is a computed field; validation ignores it as an extra key
        return [ChatMessage.model_validate_json(m) for m in raw_messages]

    # ---------- travel searches ----------

    async def record_travel_search(
        self,
        session_id: str,
        search_type: TravelSearchType,
        query: Dict[str, Any],
        results: Optional[Dict[str, Any]] = None
    ) -> TravelSearchRecord:
        await self._require_session(session_id)
        record = TravelSearchRecord(
            session_id=session_id,
            search_type=search_type,
            query=query,
            results=results
        )
        await self.redis_client.rpush(self._searches_key(session_id), record.model_dump_json())
        return record

    async def list_travel_searches(self, session_id: str) -> List[TravelSearchRecord]:
        raw_records = await self.redis_client.lrange(self._searches_key(session_id), 0, -1)
        records = [TravelSearchRecord.model_validate_json(r) for r in raw_records]
        records.reverse()
        return records

    async def close(self):
        """Close Redis connection"""
        await self.redis_client.aclose()
        logger.info("RedisChatStore connection closed")
