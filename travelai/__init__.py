# travelai/__init__.py
"""
TravelAI Chat Service Package

A travel-planning chat assistant with:
- Conversational replies (OpenAI, or deterministic templates when unavailable)
- Real-time search enrichment (SerpAPI web/news/images)
- Travel intent extraction (destination, dates, guests, budget, type)
- Session titles from the first user message
- In-memory or Redis persistence of sessions and messages
"""

__version__ = "1.0.0"

# Package structure:
# travelai/
# ├── __init__.py           <- This file
# ├── main.py               <- FastAPI application entry
# ├── config.py             <- Configuration settings
# │
# ├── agents/               <- Orchestration
# │   ├── travel_assistant.py <- Response pipeline + strategies
# │   └── chat_service.py   <- Session/message operations
# │
# ├── api/                  <- FastAPI Routers
# │   ├── chat.py           <- /api/chat/sessions...
# │   └── travel.py         <- /api/travel/search
# │
# ├── interfaces/           <- Stores and external sources
# │   ├── chat_store.py     <- Store contract + in-memory store
# │   ├── redis_chat_store.py <- Redis store
# │   ├── search_enrichment.py <- SerpAPI adapter
# │   └── travel_search.py  <- Travel result contract
# │
# ├── llm/                  <- Language components
# │   ├── intent_parser.py  <- Text to TravelQuery
# │   ├── llm_client.py     <- OpenAI wrapper
# │   ├── prompts.py        <- Prompt templates
# │   ├── fallback_responses.py <- Canned replies
# │   └── title_generator.py <- Session titles
# │
# ├── schemas/              <- Pydantic Models
# │   └── chat_schemas.py
# │
# └── utils/
#     └── text_helpers.py
