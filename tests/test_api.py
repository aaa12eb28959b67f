"""HTTP surface tests (FastAPI TestClient, lifespan not started)"""

import pytest
from fastapi.testclient import TestClient

from travelai.agents.chat_service import get_chat_service
from travelai.main import app


@pytest.fixture
def client(offline_service):
    app.dependency_overrides[get_chat_service] = lambda: offline_service
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root_and_health(client):
    assert client.get("/").json()["service"] == "TravelAI Chat Service"

    health = client.get("/api/health").json()
    assert health["status"] == "healthy"
    assert "llm_configured" in health
    assert "search_configured" in health


def test_session_lifecycle(client):
    created = client.post("/api/chat/sessions", json={})
    assert created.status_code == 200
    session_id = created.json()["id"]
    assert created.json()["title"] == "New Chat"

    sent = client.post(
        f"/api/chat/sessions/{session_id}/messages",
        json={"content": "Find hotels in Tokyo for 2 adults"}
    )
    assert sent.status_code == 200
    body = sent.json()
    assert body["user_message"]["role"] == "user"
    assert body["assistant_message"]["travel_results"]["query"]["destination"] == "Tokyo"

    session = client.get(f"/api/chat/sessions/{session_id}").json()
    assert session["title"] == "Trip to Tokyo"

    messages = client.get(f"/api/chat/sessions/{session_id}/messages").json()
    assert [m["role"] for m in messages] == ["assistant", "user", "assistant"]

    searches = client.get(f"/api/chat/sessions/{session_id}/searches").json()
    assert searches[0]["search_type"] == "hotels"

    listed = client.get("/api/chat/sessions").json()
    assert listed[0]["id"] == session_id
    assert listed[0]["message_count"] == 3


def test_sessions_filtered_by_user(client):
    client.post("/api/chat/sessions", params={"user_id": "u1"}, json={"title": "Mine"})
    client.post("/api/chat/sessions", json={"title": "Anonymous"})

    mine = client.get("/api/chat/sessions", params={"user_id": "u1"}).json()
    assert [s["title"] for s in mine] == ["Mine"]
    assert mine[0]["user_id"] == "u1"


def test_rename_and_retry_title(client):
    session_id = client.post("/api/chat/sessions", json={}).json()["id"]

    renamed = client.patch(f"/api/chat/sessions/{session_id}", json={"title": "  Summer  "})
    assert renamed.status_code == 200
    assert renamed.json()["title"] == "Summer"

    assert client.patch(f"/api/chat/sessions/{session_id}", json={"title": "   "}).status_code == 422

    client.post(f"/api/chat/sessions/{session_id}/messages", json={"content": "flights to Rome"})
    client.patch(f"/api/chat/sessions/{session_id}", json={"title": "Other"})
    retried = client.post(f"/api/chat/sessions/{session_id}/title")
    assert retried.json()["title"] == "Trip to Rome"


def test_invalid_message_is_rejected(client):
    session_id = client.post("/api/chat/sessions", json={}).json()["id"]

    response = client.post(f"/api/chat/sessions/{session_id}/messages", json={"content": "   "})
    assert response.status_code == 400

    assert client.post(f"/api/chat/sessions/{session_id}/messages", json={}).status_code == 422
    assert len(client.get(f"/api/chat/sessions/{session_id}/messages").json()) == 1


def test_unknown_session_is_404(client):
    assert client.get("/api/chat/sessions/missing").status_code == 404
    assert client.get("/api/chat/sessions/missing/messages").status_code == 404
    assert client.post("/api/chat/sessions/missing/messages", json={"content": "hi"}).status_code == 404
    assert client.patch("/api/chat/sessions/missing", json={"title": "x"}).status_code == 404


def test_travel_search_contract(client):
    hotels = client.post("/api/travel/search", json={"destination": "Tokyo", "type": "hotels"})
    assert hotels.status_code == 200
    assert hotels.json() == {"hotels": []}

    mixed = client.post("/api/travel/search", json={"destination": "Tokyo", "type": "mixed"})
    assert mixed.json() == {}

    assert client.post("/api/travel/search", json={"type": "cruises"}).status_code == 422
