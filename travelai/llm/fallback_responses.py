# llm/fallback_responses.py
"""
Fallback Responses
Deterministic, template-based replies used whenever the model is
unconfigured or fails:
- Hotel, flight and activity templates (keyword routed)
- Destination overview (destination found, no travel keyword)
- General travel-planning prompt (nothing detected)

Each template interpolates the extracted destination, or leaves it out.
A TravelQuery is attached only when a destination was found.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from loguru import logger

from ..schemas import TravelQuery, TravelType
from ..utils import contains_any
from .intent_parser import (
    intent_parser,
    HOTEL_KEYWORDS,
    FLIGHT_KEYWORDS,
    ACTIVITY_KEYWORDS,
)


@dataclass
class FallbackResponse:
    """Canned reply plus the query derived from the message, if any"""
    message: str
    travel_query: Optional[TravelQuery] = None


# ============================================
# Templates
# ============================================

HOTEL_TEMPLATE = """Great! I'll help you find the perfect accommodation{dest_text}. Here are some excellent options I found:

🏨 **Hotel Recommendations{dest_text}:**

**Luxury Options:**
- Premium hotels with world-class amenities
- 5-star service and prime locations
- Spa, fine dining, and concierge services

**Mid-Range Choices:**
- Comfortable hotels with great value
- Modern amenities and convenient locations
- Perfect balance of quality and price

**Budget-Friendly:**
- Clean, safe, and affordable options
- Essential amenities for comfortable stays
- Great for budget-conscious travelers

To get more specific recommendations, please let me know:
- Your travel dates
- Number of guests
- Preferred budget range
- Any special requirements (location, amenities, etc.)

I'll provide personalized hotel suggestions with booking links!"""

FLIGHT_TEMPLATE = """Perfect! I'll help you find the best flights{dest_text}. Here's what I can offer:

✈️ **Flight Search{dest_text}:**

**Flight Options:**
- Direct flights for convenience
- Connecting flights for better prices
- Flexible dates for savings
- Multiple airlines comparison

**Booking Benefits:**
- Real-time price tracking
- Flexible cancellation options
- Seat selection assistance
- Baggage information

**Travel Tips:**
- Book 6-8 weeks in advance for best prices
- Tuesday and Wednesday are often cheapest
- Consider nearby airports for savings

To find your perfect flight, I need:
- Departure city/airport
- Travel dates (or flexible date range)
- Number of passengers
- Preferred budget or class (economy/business)

I'll search across multiple airlines to find you the best deals!"""

ACTIVITY_TEMPLATE = """Exciting! I'll help you discover amazing activities{dest_text}. Here's what awaits you:

🎯 **Activities & Experiences{dest_text}:**

**Must-Do Attractions:**
- Iconic landmarks and monuments
- Museums and cultural sites
- Historical tours and experiences

**Adventure & Outdoor:**
- Hiking and nature excursions
- Water sports and beach activities
- Adventure tours and extreme sports

**Cultural Experiences:**
- Local food tours and cooking classes
- Traditional performances and festivals
- Art galleries and local markets

**Family-Friendly:**
- Theme parks and entertainment
- Interactive museums and zoos
- Kid-friendly tours and activities

Let me know more about your preferences:
- What type of activities interest you most?
- How many days will you be visiting?
- Any mobility requirements?
- Adventure level (relaxed, moderate, extreme)?

I'll create a personalized itinerary with the best activities for your trip!"""

DESTINATION_TEMPLATE = """{destination} is an amazing destination! I'm excited to help you plan your trip there.

🌟 **Why {destination} is Special:**
- Rich culture and history
- Incredible cuisine and dining
- Beautiful attractions and landmarks
- Unique local experiences

**I can help you with:**
🏨 **Accommodation** - From luxury hotels to budget-friendly options
✈️ **Flights** - Best routes and deals to {destination}
🎯 **Activities** - Must-see attractions and hidden gems
🍽️ **Dining** - Local cuisine and restaurant recommendations
🚗 **Transportation** - Getting around the city
📅 **Itinerary** - Day-by-day planning for your trip

**Next Steps:**
To create your perfect {destination} experience, tell me:
- When are you planning to visit?
- How long will you stay?
- What's your travel style? (luxury, mid-range, budget)
- What interests you most? (culture, food, nature, nightlife, etc.)

I'll create a customized travel plan just for you!"""

GENERAL_RESPONSE = """I'd love to help you plan your trip! I can assist you with:

🏨 **Hotels & Accommodation** - Find the perfect place to stay
✈️ **Flights** - Search for the best flight options
🎯 **Activities** - Discover amazing things to do
🗺️ **Itineraries** - Plan your perfect travel schedule

To get started, tell me:
- Where would you like to go?
- When are you planning to travel?
- What type of experience are you looking for?

I'll provide personalized recommendations to make your trip unforgettable!"""


def _build(
    template: str,
    travel_type: TravelType,
    preposition: str,
    destination: Optional[str],
    text: str
) -> FallbackResponse:
    dest_text = f" {preposition} {destination}" if destination else ""
    query = intent_parser.build_query(text, travel_type) if destination else None
    return FallbackResponse(message=template.format(dest_text=dest_text), travel_query=query)


def hotel_response(destination: Optional[str], text: str) -> FallbackResponse:
    return _build(HOTEL_TEMPLATE, TravelType.HOTELS, "in", destination, text)


def flight_response(destination: Optional[str], text: str) -> FallbackResponse:
    return _build(FLIGHT_TEMPLATE, TravelType.FLIGHTS, "to", destination, text)


def activity_response(destination: Optional[str], text: str) -> FallbackResponse:
    return _build(ACTIVITY_TEMPLATE, TravelType.ACTIVITIES, "in", destination, text)


def destination_response(destination: str, text: str) -> FallbackResponse:
    return FallbackResponse(
        message=DESTINATION_TEMPLATE.format(destination=destination),
        travel_query=intent_parser.build_query(text, TravelType.MIXED)
    )


# First matching keyword list wins
FALLBACK_ROUTES: List[Tuple[Sequence[str], Callable[[Optional[str], str], FallbackResponse]]] = [
    (HOTEL_KEYWORDS, hotel_response),
    (FLIGHT_KEYWORDS, flight_response),
    (ACTIVITY_KEYWORDS, activity_response),
]


def generate_fallback_response(user_message: str) -> FallbackResponse:
    """
    Route a message to a canned template.

    Total over all input, including empty text: the general prompt is
    the last resort, so the returned message is never empty.
    """
    text = (user_message or "").lower()
    destination = intent_parser.extract_destination(text)

    for keywords, template_fn in FALLBACK_ROUTES:
        if contains_any(text, keywords):
            logger.debug(f"Fallback route: {template_fn.__name__} (destination={destination})")
            return template_fn(destination, text)

    if destination:
        return destination_response(destination, text)

    return FallbackResponse(message=GENERAL_RESPONSE)
