# api/travel.py
"""
Travel Search Endpoint
Returns hotel, flight or activity results for a TravelQuery.
"""

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from ..agents.chat_service import ChatService, get_chat_service
from ..schemas import TravelQuery, TravelResults


router = APIRouter(prefix="/api/travel", tags=["travel"])


@router.post("/search", response_model=TravelResults, response_model_exclude_none=True)
async def search_travel(query: TravelQuery, service: ChatService = Depends(get_chat_service)):
    """Only the list matching query.type is returned; 'mixed' returns {}"""
    try:
        return await service.search_travel(query)
    except Exception as e:
        logger.exception(f"Travel search error: {e}")
        raise HTTPException(status_code=500, detail="Failed to search travel options")
