from sqlalchemy.exc import OperationalError

from reflect_ai.config.insights import GREETING_SUGGESTIONS, HEALTH_INSIGHTS
from reflect_server.models.chat_message import ChatMessage
from reflect_server.models.health_entry import HealthEntry
from reflect_server.routers import chat_message as chat_router

from conftest import AUTH_HEADERS, USER_ID


def test_start_session(client, db):
    res = client.post("/chats/sessions", headers=AUTH_HEADERS)
    assert res.status_code == 201
    data = res.json()
    assert data["session_id"].startswith("session_")
    assert data["suggestions"] == GREETING_SUGGESTIONS
    # nothing stored before the first message
    assert db.query(ChatMessage).count() == 0


def test_keyword_reply_is_stored_with_the_question(client, db):
    session_id = client.post("/chats/sessions", headers=AUTH_HEADERS).json()["session_id"]

    res = client.post(
        "/chats/messages",
        json={"message": "I can't sleep", "session_id": session_id},
        headers=AUTH_HEADERS,
    )
    assert res.status_code == 200
    data = res.json()
    assert data["session_id"] == session_id
    assert data["topic"] == "sleep"
    assert data["response"] == HEALTH_INSIGHTS[0]["response"]
    assert data["notices"] == []

    history = client.get("/chats/messages", params={"session_id": session_id}, headers=AUTH_HEADERS).json()
    assert [m["is_user_message"] for m in history] == [True, False]
    assert history[0]["message"] == "I can't sleep"
    assert history[1]["message"] == data["response"]

    bot_row = db.query(ChatMessage).filter(ChatMessage.is_user_message.is_(False)).one()
    assert bot_row.user_id == USER_ID
    assert bot_row.context_data["user_message"] == "I can't sleep"
    assert bot_row.context_data["suggestions"] == data["suggestions"]


def test_missing_session_starts_a_new_one(client):
    first = client.post("/chats/messages", json={"message": "hi"}, headers=AUTH_HEADERS).json()
    second = client.post("/chats/messages", json={"message": "hi"}, headers=AUTH_HEADERS).json()
    assert first["session_id"].startswith("session_")
    assert first["session_id"] != second["session_id"]


def test_summary_uses_saved_entries(client):
    for day in ("2025-11-16", "2025-11-17", "2025-11-18"):
        body = {"entry_date": day, "mood": "excellent", "sleep_hours": 8, "exercise_minutes": 60}
        client.post("/health/entries", json=body, headers=AUTH_HEADERS)

    data = client.post("/chats/messages", json={"message": "how am I doing?"}, headers=AUTH_HEADERS).json()
    assert data["topic"] == "summary"
    assert "Your mood has been quite positive recently!" in data["response"]
    assert "average of 8.0 hours" in data["response"]
    # 180 minutes over the window
    assert "Great job staying active!" in data["response"]


def test_history_is_per_user(client, token_subject):
    session_id = client.post("/chats/messages", json={"message": "hello"}, headers=AUTH_HEADERS).json()["session_id"]

    token_subject["sub"] = "other_user"
    res = client.get("/chats/messages", params={"session_id": session_id}, headers=AUTH_HEADERS)
    assert res.status_code == 200
    assert res.json() == []


def test_empty_message_rejected(client):
    assert client.post("/chats/messages", json={"message": ""}, headers=AUTH_HEADERS).status_code == 422


def test_storage_failure_still_replies(client, db, monkeypatch):
    def broken_append(*args, **kwargs):
        raise OperationalError("INSERT INTO chats", {}, Exception("database is locked"))

    monkeypatch.setattr(chat_router, "append_message_row", broken_append)

    res = client.post("/chats/messages", json={"message": "I feel stressed"}, headers=AUTH_HEADERS)
    assert res.status_code == 200
    data = res.json()
    assert data["topic"] == "mood"
    assert [n["description"] for n in data["notices"]] == [
        "Message saved locally but may not be synced to database.",
        "Response saved locally but may not be synced to database.",
    ]
    assert all(n["variant"] == "error" for n in data["notices"])
    assert db.query(ChatMessage).count() == 0


def test_reply_uses_entries_read_before_a_failed_save(client, monkeypatch):
    for day in ("2025-11-17", "2025-11-18"):
        body = {"entry_date": day, "mood": "excellent", "sleep_hours": 8}
        client.post("/health/entries", json=body, headers=AUTH_HEADERS)

    def failing_append(db, *args, **kwargs):
        # the rows read for the reply disappear before the rollback
        db.query(HealthEntry).delete()
        db.commit()
        raise OperationalError("INSERT INTO chats", {}, Exception("connection lost"))

    monkeypatch.setattr(chat_router, "append_message_row", failing_append)

    res = client.post("/chats/messages", json={"message": "how am I doing?"}, headers=AUTH_HEADERS)
    assert res.status_code == 200
    data = res.json()
    assert "Your mood has been quite positive recently!" in data["response"]
    assert "average of 8.0 hours" in data["response"]
    assert len(data["notices"]) == 2


def test_message_over_size_limit(client, db):
    res = client.post("/chats/messages", json={"message": "a" * 70_000}, headers=AUTH_HEADERS)
    assert res.status_code == 400
    assert res.json()["detail"] == "Message is too long."
    assert db.query(ChatMessage).count() == 0
