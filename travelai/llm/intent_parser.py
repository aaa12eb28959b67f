# llm/intent_parser.py
"""
Intent Parser for the Travel Assistant
Extracts best-effort travel hints from free-form text:
- Destination (gazetteer lookup)
- Dates, guest count, budget (ordered regex rule tables)
- Origin for flight queries ("from <place>")
- Travel type (hotels / flights / activities / mixed)

Every extractor is pure and total: no match is a normal outcome. Rules are
evaluated in list order and the first match wins, so the order of each table
is part of its behavior.
"""

import re
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any, List, Pattern, Sequence, Tuple

from loguru import logger

from ..schemas import TravelQuery, TravelType
from ..utils import contains_any, title_case_words


# ============================================
# Gazetteer (order is the tie-break)
# ============================================

DESTINATIONS: List[str] = [
    # Europe
    "paris", "london", "rome", "barcelona", "amsterdam", "berlin", "prague", "vienna",
    "madrid", "lisbon", "dublin", "edinburgh", "venice", "florence", "milan", "munich",
    "zurich", "stockholm", "copenhagen", "oslo", "helsinki", "warsaw", "budapest",
    "krakow", "athens", "istanbul", "santorini", "mykonos", "dubrovnik", "split",

    # Asia
    "tokyo", "kyoto", "osaka", "seoul", "busan", "bangkok", "phuket", "singapore",
    "hong kong", "macau", "taipei", "manila", "cebu", "bali", "jakarta", "kuala lumpur",
    "penang", "hanoi", "ho chi minh", "siem reap", "phnom penh", "yangon", "mandalay",
    "kathmandu", "pokhara", "delhi", "mumbai", "goa", "jaipur", "agra", "kerala",
    "bangalore", "chennai", "kolkata", "varanasi", "rishikesh", "dharamshala",

    # Americas
    "new york", "los angeles", "san francisco", "chicago", "miami", "las vegas",
    "washington", "boston", "seattle", "portland", "denver", "austin", "nashville",
    "new orleans", "toronto", "vancouver", "montreal", "mexico city", "cancun",
    "playa del carmen", "tulum", "puerto vallarta", "guatemala city", "antigua",
    "san jose", "panama city", "bogota", "medellin", "cartagena", "lima", "cusco",
    "machu picchu", "quito", "guayaquil", "buenos aires", "mendoza", "bariloche",
    "santiago", "valparaiso", "sao paulo", "rio de janeiro", "salvador", "brasilia",

    # Oceania
    "sydney", "melbourne", "brisbane", "perth", "adelaide", "darwin", "cairns",
    "gold coast", "auckland", "wellington", "christchurch", "queenstown", "rotorua",

    # Africa & Middle East
    "dubai", "abu dhabi", "doha", "kuwait city", "riyadh", "jeddah", "muscat",
    "cairo", "alexandria", "marrakech", "casablanca", "fez", "rabat", "tunis",
    "cape town", "johannesburg", "durban", "nairobi", "mombasa", "dar es salaam",
    "zanzibar", "addis ababa", "kigali", "kampala",
]


# ============================================
# Rule tables
# ============================================

DATE_PATTERNS: List[Pattern] = [
    re.compile(r"next month", re.IGNORECASE),
    re.compile(r"next week", re.IGNORECASE),
    re.compile(r"this weekend", re.IGNORECASE),
    re.compile(
        r"january|february|march|april|may|june|july|august|september|october|november|december",
        re.IGNORECASE
    ),
    re.compile(r"\d{1,2}/\d{1,2}"),
    re.compile(r"\d{1,2}-\d{1,2}"),
]

GUEST_PATTERN: Pattern = re.compile(r"(\d+)\s*(people|person|guest|adult|traveler)", re.IGNORECASE)

# "from <place>" up to "to", punctuation or end of text
ORIGIN_PATTERN: Pattern = re.compile(r"\bfrom\s+(.+?)(?:\s+to\b|[,.!?]|$)", re.IGNORECASE)

BUDGET_PATTERNS: List[Pattern] = [
    re.compile(r"budget", re.IGNORECASE),
    re.compile(r"cheap", re.IGNORECASE),
    re.compile(r"expensive", re.IGNORECASE),
    re.compile(r"luxury", re.IGNORECASE),
    re.compile(r"\$\d+"),
    re.compile(r"under \$?\d+", re.IGNORECASE),
]

HOTEL_KEYWORDS = ["hotel", "accommodation", "stay"]
FLIGHT_KEYWORDS = ["flight", "fly", "plane"]
ACTIVITY_KEYWORDS = ["activity", "activities", "things to do", "attraction"]

TRAVEL_TYPE_RULES: List[Tuple[Sequence[str], TravelType]] = [
    (HOTEL_KEYWORDS, TravelType.HOTELS),
    (FLIGHT_KEYWORDS, TravelType.FLIGHTS),
    (ACTIVITY_KEYWORDS, TravelType.ACTIVITIES),
]


def _first_match(patterns: Sequence[Pattern], text: str) -> Optional[str]:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match.group(0)
    return None


@dataclass
class ParsedIntent:
    """Travel hints extracted from a message"""
    destination: Optional[str] = None
    dates: Optional[str] = None
    guests: Optional[str] = None
    budget: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class IntentParser:
    """
    Rule-based parser over lower-cased message text.
    No side effects; the same text always yields the same hints.
    """

    def __init__(self, destinations: Optional[Sequence[str]] = None):
        self.destinations = list(destinations or DESTINATIONS)

    def extract_destination(self, text: str) -> Optional[str]:
        """First gazetteer entry found in text, title-cased word by word"""
        lowered = text.lower()
        for destination in self.destinations:
            if destination in lowered:
                return title_case_words(destination)
        return None

    def extract_origin(self, text: str) -> Optional[str]:
        """Gazetteer place named after 'from' ("flights from boston to rome" -> Boston)"""
        match = ORIGIN_PATTERN.search(text)
        if not match:
            return None
        return self.extract_destination(match.group(1))

    def extract_dates(self, text: str) -> Optional[str]:
        return _first_match(DATE_PATTERNS, text)

    def extract_guests(self, text: str) -> Optional[str]:
        match = GUEST_PATTERN.search(text)
        return match.group(1) if match else None

    def extract_budget(self, text: str) -> Optional[str]:
        return _first_match(BUDGET_PATTERNS, text)

    def detect_travel_type(self, text: str) -> TravelType:
        """hotels/flights/activities by keyword, otherwise mixed"""
        for keywords, travel_type in TRAVEL_TYPE_RULES:
            if contains_any(text, keywords):
                return travel_type
        return TravelType.MIXED

    def parse(self, text: str) -> ParsedIntent:
        lowered = text.lower()
        intent = ParsedIntent(
            destination=self.extract_destination(lowered),
            dates=self.extract_dates(lowered),
            guests=self.extract_guests(lowered),
            budget=self.extract_budget(lowered)
        )
        logger.debug(f"Parsed intent: {intent.to_dict()}")
        return intent

    def build_query(self, text: str, travel_type: Optional[TravelType] = None) -> TravelQuery:
        """TravelQuery from text; type detected by keyword unless given.
        Origin is only filled in for flight queries."""
        intent = self.parse(text)
        query_type = travel_type or self.detect_travel_type(text)
        return TravelQuery(
            destination=intent.destination,
            type=query_type,
            dates=intent.dates,
            guests=intent.guests,
            budget=intent.budget,
            origin=self.extract_origin(text) if query_type == TravelType.FLIGHTS else None
        )


# ============================================
# Global Instance
# ============================================

intent_parser = IntentParser()


# ============================================
# Convenience Function
# ============================================

def parse_intent(text: str) -> Dict[str, Any]:
    """Parse a message and return dict"""
    return intent_parser.parse(text).to_dict()
