"""
Shared fixtures for the TravelAI test suite.

Collaborators are always built with explicit credentials so the ambient
environment (.env, OPENAI_API_KEY, SERPAPI_KEY) never leaks into a test.
"""

from types import SimpleNamespace
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from travelai.agents.chat_service import ChatService
from travelai.agents.travel_assistant import TravelAssistant
from travelai.interfaces.chat_store import MemoryChatStore
from travelai.interfaces.search_enrichment import SearchEnrichmentAdapter
from travelai.interfaces.travel_search import TravelSearchService
from travelai.llm.llm_client import LLMClient
from travelai.llm.title_generator import TitleGenerator


# ============================================
# Fake OpenAI client
# ============================================

class FakeCompletions:
    def __init__(self, reply: Optional[str] = "Sure, here's a plan.", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    """Stands in for openai.AsyncOpenAI: only chat.completions.create is used"""

    def __init__(self, reply: Optional[str] = "Sure, here's a plan.", error: Optional[Exception] = None):
        self.completions = FakeCompletions(reply, error)
        self.chat = SimpleNamespace(completions=self.completions)


@pytest.fixture
def make_llm() -> Callable[..., LLMClient]:
    """LLMClient backed by a FakeOpenAI; configured=False gives an empty key"""

    def _make(reply: Optional[str] = "Sure, here's a plan.", error: Optional[Exception] = None, configured: bool = True):
        fake = FakeOpenAI(reply, error)
        return LLMClient(api_key="sk-test" if configured else "", model="gpt-4o", timeout=5, client=fake)

    return _make


@pytest.fixture
def unconfigured_llm(make_llm) -> LLMClient:
    return make_llm(configured=False)


# ============================================
# SerpAPI over httpx.MockTransport
# ============================================

class SerpApiStub:
    """Records every request and answers per engine"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responses: Dict[str, httpx.Response] = {}

    def respond(self, engine: str, status_code: int = 200, json: Any = None):
        self.responses[engine] = httpx.Response(status_code, json=json if json is not None else {})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        engine = request.url.params.get("engine", "google")
        return self.responses.get(engine, httpx.Response(200, json={}))

    def params_for(self, engine: str) -> Dict[str, str]:
        for request in self.requests:
            if request.url.params.get("engine") == engine:
                return dict(request.url.params)
        raise AssertionError(f"no {engine} request was made")


WEB_PAYLOAD = {
    "organic_results": [
        {
            "position": 1,
            "title": "Best hotels in Tokyo",
            "link": "https://example.com/tokyo-hotels",
            "displayed_link": "example.com",
            "snippet": "Shinjuku and Ginza are popular areas to stay in Tokyo.",
        },
        {
            "position": 2,
            "title": "Tokyo travel guide",
            "link": "https://example.org/tokyo",
            "snippet": "Plan your trip with this Tokyo guide.",
        },
        {
            "position": 3,
            "title": "Tokyo on a budget",
            "link": "https://example.net/budget",
            "snippet": "",
        },
        {
            "position": 4,
            "title": "Fourth result",
            "link": "https://example.net/fourth",
            "snippet": "Should not be listed as a resource.",
        },
    ],
    "related_searches": [{"query": "tokyo hotels cheap"}, {"query": "tokyo ryokan"}],
}


@pytest.fixture
def serpapi() -> SerpApiStub:
    stub = SerpApiStub()
    stub.respond("google", json=WEB_PAYLOAD)
    return stub


@pytest.fixture
def search_adapter(serpapi) -> SearchEnrichmentAdapter:
    client = httpx.AsyncClient(transport=httpx.MockTransport(serpapi.handler))
    return SearchEnrichmentAdapter(
        api_key="serp-test",
        base_url="https://serpapi.test/search.json",
        timeout=5,
        default_location="United States",
        http_client=client
    )


@pytest.fixture
def offline_search(serpapi) -> SearchEnrichmentAdapter:
    """Unconfigured adapter wired to the stub, so any request would be recorded"""
    client = httpx.AsyncClient(transport=httpx.MockTransport(serpapi.handler))
    return SearchEnrichmentAdapter(api_key="", base_url="https://serpapi.test/search.json", http_client=client)


# ============================================
# Chat service
# ============================================

@pytest.fixture
def store() -> MemoryChatStore:
    return MemoryChatStore()


@pytest.fixture
def offline_service(store, unconfigured_llm, offline_search) -> ChatService:
    """No model and no search credentials: fully deterministic"""
    return ChatService(
        store=store,
        assistant=TravelAssistant(unconfigured_llm, offline_search),
        title_generator=TitleGenerator(unconfigured_llm),
        travel_search=TravelSearchService()
    )
