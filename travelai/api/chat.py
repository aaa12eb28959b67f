# api/chat.py
"""
Chat API Endpoints
Sessions, messages, titles and travel search audit records.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger

from ..agents.chat_service import ChatService, get_chat_service
from ..interfaces.chat_store import SessionNotFoundError
from ..schemas import (
    ChatMessage,
    ChatSession,
    CreateSessionRequest,
    RenameSessionRequest,
    SendMessageRequest,
    SendMessageResponse,
    SessionSummary,
    TravelSearchRecord,
)


router = APIRouter(prefix="/api/chat", tags=["chat"])


def _not_found(e: SessionNotFoundError) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Session {e.session_id} not found")


def _server_error(action: str, e: Exception) -> HTTPException:
    logger.exception(f"Failed to {action}: {e}")
    return HTTPException(status_code=500, detail=f"Failed to {action}")


# ============================================
# Sessions
# ============================================

@router.post("/sessions", response_model=ChatSession)
async def create_session(
    request: CreateSessionRequest,
    user_id: Optional[str] = Query(None, description="Owner of the session"),
    service: ChatService = Depends(get_chat_service)
):
    """Create a chat session with a welcome message"""
    try:
        return await service.create_session(request.title, user_id)
    except Exception as e:
        raise _server_error("create chat session", e)


@router.get("/sessions", response_model=List[SessionSummary])
async def list_sessions(
    user_id: Optional[str] = Query(None, description="Owner; omit for anonymous sessions"),
    service: ChatService = Depends(get_chat_service)
):
    """List sessions, most recently updated first"""
    try:
        return await service.list_sessions(user_id)
    except Exception as e:
        raise _server_error("fetch chat sessions", e)


@router.get("/sessions/{session_id}", response_model=ChatSession)
async def get_session(session_id: str, service: ChatService = Depends(get_chat_service)):
    try:
        return await service.get_session(session_id)
    except SessionNotFoundError as e:
        raise _not_found(e)
    except Exception as e:
        raise _server_error("fetch chat session", e)


@router.patch("/sessions/{session_id}", response_model=ChatSession)
async def rename_session(
    session_id: str,
    request: RenameSessionRequest,
    service: ChatService = Depends(get_chat_service)
):
    try:
        return await service.rename_session(session_id, request.title)
    except SessionNotFoundError as e:
        raise _not_found(e)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise _server_error("rename chat session", e)


@router.post("/sessions/{session_id}/title", response_model=ChatSession)
async def regenerate_title(session_id: str, service: ChatService = Depends(get_chat_service)):
    """Retry title generation from the first user message"""
    try:
        return await service.regenerate_title(session_id)
    except SessionNotFoundError as e:
        raise _not_found(e)
    except Exception as e:
        raise _server_error("generate chat title", e)


# ============================================
# Messages
# ============================================

@router.get("/sessions/{session_id}/messages", response_model=List[ChatMessage])
async def list_messages(session_id: str, service: ChatService = Depends(get_chat_service)):
    """Messages in creation order"""
    try:
        return await service.list_messages(session_id)
    except SessionNotFoundError as e:
        raise _not_found(e)
    except Exception as e:
        raise _server_error("fetch messages", e)


@router.post("/sessions/{session_id}/messages", response_model=SendMessageResponse)
async def send_message(
    session_id: str,
    request: SendMessageRequest,
    service: ChatService = Depends(get_chat_service)
):
    """Send a user message and get the assistant reply"""
    try:
        user_message, assistant_message = await service.send_message(session_id, request.content)
    except SessionNotFoundError as e:
        raise _not_found(e)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise _server_error("process message", e)

    return SendMessageResponse(user_message=user_message, assistant_message=assistant_message)


@router.get("/sessions/{session_id}/searches", response_model=List[TravelSearchRecord])
async def list_travel_searches(session_id: str, service: ChatService = Depends(get_chat_service)):
    """Travel search audit records, newest first"""
    try:
        return await service.list_travel_searches(session_id)
    except SessionNotFoundError as e:
        raise _not_found(e)
    except Exception as e:
        raise _server_error("fetch travel searches", e)
