# llm/__init__.py
"""
LLM Components Package

Contains model-facing and deterministic language components:
- intent_parser: Extract travel hints (destination, dates, guests, budget, type)
- llm_client: Async OpenAI chat completions wrapper
- prompts: Prompt templates for the assistant and titles
- fallback_responses: Canned replies when the model is unavailable
- title_generator: Short session titles from the first user message
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .intent_parser import intent_parser, IntentParser, ParsedIntent, parse_intent
    from .llm_client import LLMClient, LLMError, LLMNotConfiguredError
    from .fallback_responses import FallbackResponse, generate_fallback_response
    from .title_generator import TitleGenerator, fallback_title

__all__ = [
    "intent_parser",
    "IntentParser",
    "ParsedIntent",
    "parse_intent",
    "LLMClient",
    "LLMError",
    "LLMNotConfiguredError",
    "FallbackResponse",
    "generate_fallback_response",
    "TitleGenerator",
    "fallback_title"
]
