"""Tests for the response pipeline and its strategies"""

from travelai.agents.travel_assistant import (
    FallbackStrategy,
    GenerativeStrategy,
    TravelAssistant,
    build_history_turns,
)
from travelai.llm.fallback_responses import generate_fallback_response
from travelai.schemas import ChatTurn, MessageRole, TravelType


def test_history_strings_alternate_by_position():
    turns = build_history_turns(["a", "b", "c", "d", "e", "f", "g", "h"], limit=6)
    assert [t["content"] for t in turns] == ["c", "d", "e", "f", "g", "h"]
    assert [t["role"] for t in turns] == ["user", "assistant"] * 3


def test_history_objects_keep_their_roles():
    history = [
        ChatTurn(role=MessageRole.ASSISTANT, content="Welcome!"),
        ChatTurn(role=MessageRole.USER, content="Hi"),
    ]
    turns = build_history_turns(history, limit=6)
    assert turns == [
        {"role": "assistant", "content": "Welcome!"},
        {"role": "user", "content": "Hi"},
    ]


def test_strategy_selected_by_configuration(make_llm, offline_search):
    assert isinstance(TravelAssistant(make_llm(), offline_search).select_strategy(), GenerativeStrategy)
    assert isinstance(
        TravelAssistant(make_llm(configured=False), offline_search).select_strategy(),
        FallbackStrategy
    )


async def test_fallback_mode_makes_no_calls(unconfigured_llm, offline_search, serpapi):
    assistant = TravelAssistant(unconfigured_llm, offline_search)

    response = await assistant.respond("Things to do in Rome")

    assert response.message == generate_fallback_response("Things to do in Rome").message
    assert response.should_search_travel is False
    assert response.travel_query.type == TravelType.ACTIVITIES
    assert response.search_results is None
    assert serpapi.requests == []
    assert unconfigured_llm._client.completions.calls == []


async def test_generative_reply_with_history(make_llm, offline_search):
    llm = make_llm(reply="  Kyoto is lovely in autumn.  ")
    assistant = TravelAssistant(llm, offline_search)
    history = [
        ChatTurn(role=MessageRole.ASSISTANT, content="Hello! Where to?"),
        ChatTurn(role=MessageRole.USER, content="Japan"),
        ChatTurn(role=MessageRole.ASSISTANT, content="Great choice."),
    ]

    response = await assistant.respond("When should I visit Kyoto?", history)

    assert response.message == "Kyoto is lovely in autumn."
    assert response.should_search_travel is False

    call = llm._client.completions.calls[0]
    messages = call["messages"]
    assert messages[0]["role"] == "system"
    assert "You are TravelAI" in messages[0]["content"]
    assert [m["role"] for m in messages[1:]] == ["assistant", "user", "assistant", "user"]
    assert messages[-1]["content"] == "When should I visit Kyoto?"
    assert call["model"] == "gpt-4o"


async def test_model_failure_degrades_to_fallback(make_llm, offline_search):
    assistant = TravelAssistant(make_llm(error=RuntimeError("connection reset")), offline_search)

    response = await assistant.respond("Find hotels in Tokyo for 2 adults")

    assert response.message.startswith("Great! I'll help you find the perfect accommodation in Tokyo.")
    assert response.should_search_travel is True
    assert response.travel_query.destination == "Tokyo"
    assert response.travel_query.guests == "2"


async def test_empty_model_reply_degrades_to_fallback(make_llm, offline_search):
    assistant = TravelAssistant(make_llm(reply="   "), offline_search)

    response = await assistant.respond("hello")

    assert response.message.startswith("I'd love to help you plan your trip!")


async def test_enrichment_folds_into_prompt_and_adds_resources(make_llm, search_adapter):
    llm = make_llm(reply="Here are some ideas.")
    assistant = TravelAssistant(llm, search_adapter)

    response = await assistant.respond("best areas to stay in tokyo")

    system_prompt = llm._client.completions.calls[0]["messages"][0]["content"]
    assert "Real-time search results:" in system_prompt
    assert "- Best hotels in Tokyo: Shinjuku and Ginza" in system_prompt

    assert response.message.startswith("Here are some ideas.")
    assert "📚 **Additional Resources:**" in response.message
    assert "1. [Best hotels in Tokyo](https://example.com/tokyo-hotels)" in response.message
    assert "3. [Tokyo on a budget](https://example.net/budget)" in response.message
    assert "Fourth result" not in response.message
    assert response.search_results is not None


async def test_resources_added_in_fallback_mode(unconfigured_llm, search_adapter):
    assistant = TravelAssistant(unconfigured_llm, search_adapter)

    response = await assistant.respond("hotels in tokyo")

    assert response.message.startswith("Great! I'll help you find the perfect accommodation in Tokyo.")
    assert "📚 **Additional Resources:**" in response.message


async def test_enrichment_failure_is_not_fatal(unconfigured_llm, search_adapter, serpapi):
    serpapi.respond("google", status_code=500)
    assistant = TravelAssistant(unconfigured_llm, search_adapter)

    response = await assistant.respond("hotels in tokyo")

    assert response.search_results is None
    assert "Additional Resources" not in response.message
    assert response.message.strip()


async def test_news_and_images_requested_by_keywords(unconfigured_llm, search_adapter, serpapi):
    assistant = TravelAssistant(unconfigured_llm, search_adapter)

    await assistant.respond("show me the latest photos of Bali")

    engines = sorted(r.url.params["engine"] for r in serpapi.requests)
    assert engines == ["google", "google_images", "google_news"]


async def test_booking_keyword_without_type_keyword_is_mixed(unconfigured_llm, offline_search):
    assistant = TravelAssistant(unconfigured_llm, offline_search)

    response = await assistant.respond("what does a trip to Paris cost")

    assert response.should_search_travel is True
    assert response.travel_query.type == TravelType.MIXED
    assert response.travel_query.destination == "Paris"
