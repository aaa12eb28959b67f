# agents/travel_assistant.py
"""
Travel Assistant (response orchestration)

Pipeline per user message:
1. Enrichment: optional SerpAPI web/news/image search
2. Generation: model reply (GenerativeStrategy) or canned reply (FallbackStrategy)
3. Post-processing: "Additional Resources" section, booking intent and TravelQuery

The assistant is stateless across calls. Every external failure degrades
once to the next tier; the caller always gets a non-empty message.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

from loguru import logger

from ..config import settings
from ..schemas import (
    AssistantResponse,
    ChatMessage,
    ChatTurn,
    EnrichmentResult,
    MessageRole,
    TravelQuery,
)
from ..utils import contains_any, truncate_text
from ..interfaces.search_enrichment import SearchEnrichmentAdapter, SearchError
from ..llm.intent_parser import intent_parser
from ..llm.llm_client import LLMClient, LLMError
from ..llm.fallback_responses import generate_fallback_response
from ..llm.prompts import TRAVEL_ASSISTANT_PROMPT, SEARCH_CONTEXT_PROMPT


NEWS_KEYWORDS = ["news", "latest", "recent", "current", "update", "today", "events", "happening"]
IMAGE_KEYWORDS = ["photo", "picture", "image", "show me", "look like", "pics"]
BOOKING_KEYWORDS = ["hotel", "flight", "book", "reserve", "availability", "prices", "cost"]

CONTEXT_SNIPPETS = 3
RESOURCE_LINKS = 3
RESOURCE_SNIPPET_CHARS = 120

# Plain strings take their role from position parity (user first)
HistoryEntry = Union[str, ChatMessage, ChatTurn]


@dataclass
class DraftReply:
    """Reply text from a strategy, before post-processing"""
    message: str
    travel_query: Optional[TravelQuery] = None


# ============================================
# Context helpers
# ============================================

def build_history_turns(history: Sequence[HistoryEntry], limit: int) -> List[Dict[str, str]]:
    """Last `limit` history entries as role/content dicts"""
    window = list(history)[-limit:] if limit > 0 else []
    turns = []
    for index, entry in enumerate(window):
        if isinstance(entry, str):
            role = MessageRole.USER if index % 2 == 0 else MessageRole.ASSISTANT
            content = entry
        else:
            role = entry.role
            content = entry.content
        turns.append({"role": role.value, "content": content})
    return turns


def build_search_context(enrichment: Optional[EnrichmentResult]) -> str:
    """Enrichment summary and top snippets for the system prompt"""
    if enrichment is None:
        return ""

    summaries = [enrichment.web_results.summary]
    if enrichment.news_results:
        summaries.append(enrichment.news_results.summary)

    top = enrichment.web_results.organic_results[:CONTEXT_SNIPPETS]
    snippets = "\n".join(f"- {r.title}: {r.snippet}" for r in top) or "- (none)"

    return SEARCH_CONTEXT_PROMPT.format(summary="\n".join(summaries), snippets=snippets)


def format_resources(enrichment: Optional[EnrichmentResult]) -> str:
    if enrichment is None or not enrichment.web_results.organic_results:
        return ""

    lines = ["", "", "📚 **Additional Resources:**"]
    for index, result in enumerate(enrichment.web_results.organic_results[:RESOURCE_LINKS], 1):
        lines.append(f"{index}. [{result.title}]({result.link})")
        if result.snippet:
            lines.append(f"   {truncate_text(result.snippet, RESOURCE_SNIPPET_CHARS)}")
    return "\n".join(lines)


# ============================================
# Response Strategies
# ============================================

class ResponseStrategy(ABC):
    """One way of producing the reply text"""

    name = "base"

    @abstractmethod
    async def generate(
        self,
        message: str,
        history: Sequence[HistoryEntry],
        enrichment: Optional[EnrichmentResult]
    ) -> DraftReply:
        ...


class FallbackStrategy(ResponseStrategy):
    """Deterministic templates; never fails, never empty"""

    name = "fallback"

    async def generate(
        self,
        message: str,
        history: Sequence[HistoryEntry],
        enrichment: Optional[EnrichmentResult]
    ) -> DraftReply:
        fallback = generate_fallback_response(message)
        return DraftReply(message=fallback.message, travel_query=fallback.travel_query)


class GenerativeStrategy(ResponseStrategy):
    """OpenAI chat completion over system prompt + history + message"""

    name = "generative"

    def __init__(self, llm: LLMClient, history_turns: Optional[int] = None):
        self.llm = llm
        self.history_turns = settings.MODEL_HISTORY_TURNS if history_turns is None else history_turns

    async def generate(
        self,
        message: str,
        history: Sequence[HistoryEntry],
        enrichment: Optional[EnrichmentResult]
    ) -> DraftReply:
        system_prompt = TRAVEL_ASSISTANT_PROMPT.format(search_context=build_search_context(enrichment))
        turns = build_history_turns(history, self.history_turns)
        turns.append({"role": MessageRole.USER.value, "content": message})

        reply = await self.llm.complete(
            system_prompt,
            turns,
            max_tokens=settings.OPENAI_MAX_TOKENS,
            temperature=settings.OPENAI_TEMPERATURE
        )
        return DraftReply(message=reply)


# ============================================
# Travel Assistant
# ============================================

class TravelAssistant:
    """
    Response Generator.
    The strategy is chosen once per call from llm.is_configured.
    """

    def __init__(self, llm: LLMClient, search: SearchEnrichmentAdapter):
        self.llm = llm
        self.search = search
        self.generative = GenerativeStrategy(llm)
        self.fallback = FallbackStrategy()

    def select_strategy(self) -> ResponseStrategy:
        return self.generative if self.llm.is_configured else self.fallback

    async def enrich(self, message: str) -> Optional[EnrichmentResult]:
        """Search context for the message, or None if unavailable"""
        if not self.search.is_configured:
            logger.debug("Search not configured, skipping enrichment")
            return None

        try:
            return await self.search.enrich(
                message,
                include_news=contains_any(message, NEWS_KEYWORDS),
                include_images=contains_any(message, IMAGE_KEYWORDS)
            )
        except SearchError as e:
            logger.warning(f"Enrichment failed, continuing without it: {e}")
            return None

    async def respond(self, message: str, history: Sequence[HistoryEntry] = ()) -> AssistantResponse:
        enrichment = await self.enrich(message)

        strategy = self.select_strategy()
        try:
            draft = await strategy.generate(message, history, enrichment)
        except LLMError as e:
            logger.warning(f"{strategy.name} strategy failed, using fallback: {e}")
            strategy = self.fallback
            draft = await strategy.generate(message, history, enrichment)

        if contains_any(message, BOOKING_KEYWORDS):
            travel_query = intent_parser.build_query(message)
            should_search_travel = True
        else:
            travel_query = draft.travel_query
            should_search_travel = False

        logger.info(
            f"Assistant reply via {strategy.name}: enriched={enrichment is not None}, "
            f"search_travel={should_search_travel}"
        )

        return AssistantResponse(
            message=draft.message + format_resources(enrichment),
            should_search_travel=should_search_travel,
            travel_query=travel_query,
            search_results=enrichment
        )
