"""
Travel Search Service
Defines the hotel/flight/activity result contract the web client renders.
No provider is integrated yet, so every search returns an empty list.
"""

from typing import List

from loguru import logger

from ..schemas import (
    TravelQuery,
    TravelType,
    TravelResults,
    HotelResult,
    FlightResult,
    ActivityResult,
)


# TODO: back search_hotels and search_flights with the Amadeus offer APIs
class TravelSearchService:
    """Selects one result list by query.type; 'mixed' selects none"""

    async def search_hotels(self, query: TravelQuery) -> List[HotelResult]:
        logger.info(f"Hotel search query: {query.model_dump(exclude_none=True)}")
        return []

    async def search_flights(self, query: TravelQuery) -> List[FlightResult]:
        logger.info(f"Flight search query: {query.model_dump(exclude_none=True)}")
        return []

    async def search_activities(self, query: TravelQuery) -> List[ActivityResult]:
        logger.info(f"Activities search query: {query.model_dump(exclude_none=True)}")
        return []

    async def search(self, query: TravelQuery) -> TravelResults:
        if query.type == TravelType.HOTELS:
            return TravelResults(hotels=await self.search_hotels(query))
        if query.type == TravelType.FLIGHTS:
            return TravelResults(flights=await self.search_flights(query))
        if query.type == TravelType.ACTIVITIES:
            return TravelResults(activities=await self.search_activities(query))
        return TravelResults()
