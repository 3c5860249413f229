"""End-to-end requests against the real service on in-memory SQLite."""


def test_create_session_then_history_has_system_message(client, db):
    created = client.post("/chat/session", json={"initial_message": "Hello world"})

    assert created.status_code == 201
    session_id = created.json()["session_id"]
    assert created.json()["created_at"]

    history = client.get(f"/chat/history/{session_id}")

    assert history.status_code == 200
    messages = history.json()
    assert len(messages) == 1
    assert messages[0]["content"] == "Hello world"
    assert messages[0]["sender"] == "system"
    assert messages[0]["session_id"] == session_id


def test_send_messages_and_read_them_back_in_order(client, db):
    session_id = client.post("/chat/session", json={}).json()["session_id"]

    sent = []
    for content, sender in (("A", "alice"), ("B", "bob"), ("C", "alice")):
        response = client.post(
            "/chat/message",
            json={"session_id": session_id, "content": content, "sender": sender},
        )
        assert response.status_code == 201
        sent.append(response.json())

    history = client.get(f"/chat/history/{session_id}").json()

    assert [m["content"] for m in history] == ["A", "B", "C"]
    assert [m["message_id"] for m in history] == [m["message_id"] for m in sent]
    assert history[0]["timestamp"] == sent[0]["timestamp"]


def test_send_message_to_unknown_session(client, db):
    response = client.post(
        "/chat/message",
        json={"session_id": "unknown-id", "content": "hi", "sender": "bob"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Session not found: unknown-id"


def test_history_of_unknown_session(client, db):
    response = client.get("/chat/history/unknown-id")

    assert response.status_code == 400
    assert response.json()["message"] == "Session not found: unknown-id"


def test_blank_initial_message_is_not_stored(client, db):
    session_id = client.post("/chat/session", json={"initial_message": "   "}).json()["session_id"]

    assert client.get(f"/chat/history/{session_id}").json() == []


def test_initial_message_at_length_limit_is_accepted(client, db):
    created = client.post("/chat/session", json={"initial_message": "a" * 100})

    assert created.status_code == 201
    history = client.get(f"/chat/history/{created.json()['session_id']}").json()
    assert len(history) == 1
    assert history[0]["content"] == "a" * 100
    assert history[0]["sender"] == "system"


def test_content_and_sender_at_length_limits_are_accepted(client, db):
    session_id = client.post("/chat/session", json={}).json()["session_id"]

    response = client.post(
        "/chat/message",
        json={"session_id": session_id, "content": "c" * 500, "sender": "s" * 50},
    )

    assert response.status_code == 201
    assert response.json()["content"] == "c" * 500
    assert response.json()["sender"] == "s" * 50
    history = client.get(f"/chat/history/{session_id}").json()
    assert [len(m["content"]) for m in history] == [500]
