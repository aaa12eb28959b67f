"""Async OpenAI client used by the assistant and the title generator."""

from typing import Any, Dict, List, Optional

from loguru import logger
from openai import AsyncOpenAI

from ..config import settings


class LLMError(RuntimeError):
    """The model call failed or returned nothing usable."""


class LLMNotConfiguredError(LLMError):
    """No API key is configured. This is an expected state, not a fault."""


class LLMClient:
    """
    Thin async wrapper over the OpenAI chat completions API.

    A missing key (or a placeholder key starting with "sk-your") leaves the
    client unconfigured; callers check is_configured and take their
    deterministic path without any network call.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Any = None
    ):
        self.api_key = (settings.OPENAI_API_KEY if api_key is None else api_key).strip()
        self.model = model or settings.OPENAI_MODEL
        self.timeout = timeout or settings.OPENAI_TIMEOUT
        self._client = client

        if self._client is None and self.is_configured:
            self._client = AsyncOpenAI(api_key=self.api_key, timeout=self.timeout, max_retries=0)
            logger.info(f"LLMClient: Using OpenAI ({self.model})")

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key) and not self.api_key.startswith("sk-your")

    async def complete(
        self,
        system: str,
        messages: List[Dict[str, str]],
        *,
        max_tokens: int = 1000,
        temperature: float = 0.7,
        json_mode: bool = False,
    ) -> str:
        """Get a completion for a system prompt plus role/content turns.

        Args:
            system: System prompt
            messages: Ordered {"role", "content"} turns, system excluded
            max_tokens: Max output tokens
            temperature: Sampling temperature
            json_mode: If True, force JSON output (response_format)

        Returns:
            Stripped completion text, never empty.

        Raises:
            LLMNotConfiguredError if no key is configured.
            LLMError if the call fails or the completion is empty.
        """
        if not self.is_configured or self._client is None:
            raise LLMNotConfiguredError("OpenAI API key is not configured")

        kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "system", "content": system}] + list(messages),
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = await self._client.chat.completions.create(**kwargs)
        except Exception as e:
            raise LLMError(f"OpenAI request failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            raise LLMError("OpenAI returned an empty completion")
        return content.strip()
