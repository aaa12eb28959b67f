# llm/title_generator.py
"""
Chat Title Generator
Derives a short session title from the first user message.
Uses the model when configured, keyword heuristics otherwise.
"""

from typing import Optional

from loguru import logger

from ..config import settings
from ..utils import collapse_whitespace, contains_any
from .intent_parser import intent_parser
from .llm_client import LLMClient, LLMError
from .prompts import TITLE_SYSTEM_PROMPT

MAX_TITLE_LENGTH = 60
DEFAULT_TITLE = "Travel Planning"

# Checked in order after the destination lookup
TITLE_RULES = [
    (["hotel"], "Hotel Search"),
    (["flight"], "Flight Search"),
    (["activity"], "Activity Planning"),
]


def fallback_title(message: str) -> str:
    """Heuristic title, never empty"""
    destination = intent_parser.extract_destination(message)
    if destination:
        return f"Trip to {destination}"

    for keywords, title in TITLE_RULES:
        if contains_any(message, keywords):
            return title

    return DEFAULT_TITLE


def clean_title(raw: Optional[str]) -> str:
    """Strip wrapping quotes, collapse whitespace, cap the length"""
    title = collapse_whitespace(raw or "").strip("\"'“”‘’` ")
    if len(title) > MAX_TITLE_LENGTH:
        title = title[:MAX_TITLE_LENGTH].rstrip()
    return title


class TitleGenerator:
    """Model-backed title generation with a heuristic fallback"""

    def __init__(self, llm: LLMClient):
        self.llm = llm

    async def generate(self, first_message: str) -> str:
        if not self.llm.is_configured:
            return fallback_title(first_message)

        try:
            raw = await self.llm.complete(
                TITLE_SYSTEM_PROMPT,
                [{"role": "user", "content": first_message}],
                max_tokens=settings.TITLE_MAX_TOKENS,
                temperature=settings.TITLE_TEMPERATURE
            )
        except LLMError as e:
            logger.warning(f"Title generation failed, using fallback: {e}")
            return fallback_title(first_message)

        return clean_title(raw) or fallback_title(first_message)
