"""Tests for the /api/history endpoints."""

import pytest

SAVED = {
    "id": "abc123xyz",
    "title": "Meeting Notes",
    "content": "Team agreed on two-week sprints with weekly reviews.",
    "summaryType": "STANDARD",
    "wordCount": 8,
    "createdAt": "2024-01-13T09:15:00Z",
    "documentName": "meeting-notes.txt",
}


async def _sign_in(client, email: str) -> dict:
    """Sign in with the credentials flow and return auth headers."""
    response = await client.post(
        "/api/auth/callback/credentials",
        json={"email": email, "password": "anything"},
    )
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}


class TestGetHistory:
    """Tests for GET /api/history."""

    async def test_empty_history_is_array(self, client):
        response = await client.get("/api/history")

        assert response.status_code == 200
        assert response.json() == []

    async def test_returns_saved_summaries_newest_first(self, client):
        older = {**SAVED, "id": "older", "createdAt": "2024-01-01T00:00:00Z"}
        newer = {**SAVED, "id": "newer", "createdAt": "2024-02-01T00:00:00Z"}
        await client.post("/api/history", json=older)
        await client.post("/api/history", json=newer)

        response = await client.get("/api/history")

        assert [s["id"] for s in response.json()] == ["newer", "older"]

    async def test_anonymous_sees_all_summaries(self, client):
        headers = await _sign_in(client, "alice@example.com")
        await client.post("/api/history", json={**SAVED, "id": "alice1"}, headers=headers)
        await client.post("/api/history", json={**SAVED, "id": "anon1"})

        response = await client.get("/api/history")

        assert response.status_code == 200
        assert {s["id"] for s in response.json()} == {"alice1", "anon1"}

    async def test_signed_in_user_sees_own_summaries(self, client):
        alice = await _sign_in(client, "alice@example.com")
        bob = await _sign_in(client, "bob@example.com")
        await client.post("/api/history", json={**SAVED, "id": "alice1"}, headers=alice)
        await client.post("/api/history", json={**SAVED, "id": "bob1"}, headers=bob)

        response = await client.get("/api/history", headers=alice)

        assert [s["id"] for s in response.json()] == ["alice1"]

    async def test_limit(self, client):
        for i in range(3):
            await client.post("/api/history", json={**SAVED, "id": f"s{i}"})

        response = await client.get("/api/history", params={"limit": 2})

        assert len(response.json()) == 2

    async def test_limit_out_of_range(self, client):
        response = await client.get("/api/history", params={"limit": 0})
        assert response.status_code == 422

    async def test_invalid_token_rejected(self, client):
        response = await client.get(
            "/api/history", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 401


class TestSaveHistory:
    """Tests for POST /api/history."""

    async def test_missing_content(self, client):
        body = {k: v for k, v in SAVED.items() if k != "content"}

        response = await client.post("/api/history", json=body)

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid summary data"

    async def test_empty_content(self, client):
        response = await client.post("/api/history", json={**SAVED, "content": ""})
        assert response.status_code == 400

    async def test_no_body(self, client):
        response = await client.post("/api/history")
        assert response.status_code == 400

    async def test_echoes_summary(self, client):
        response = await client.post("/api/history", json=SAVED)

        assert response.status_code == 200
        assert response.json() == SAVED

    async def test_fills_missing_fields(self, client):
        response = await client.post(
            "/api/history",
            json={"content": "Just three words", "documentName": "draft.docx"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["content"] == "Just three words"
        assert body["wordCount"] == 3
        assert body["title"] == "draft"
        assert body["summaryType"] == "STANDARD"
        assert len(body["id"]) == 9
        assert body["createdAt"]

    async def test_saved_summary_appears_in_history(self, client):
        await client.post("/api/history", json=SAVED)

        response = await client.get("/api/history")

        assert response.json()[0]["id"] == SAVED["id"]
        assert response.json()[0]["content"] == SAVED["content"]

    async def test_repost_same_id_overwrites_own_summary(self, client):
        await client.post("/api/history", json=SAVED)
        updated = {**SAVED, "content": "A different body", "wordCount": 3}

        response = await client.post("/api/history", json=updated)

        assert response.status_code == 200
        assert response.json() == updated
        history = await client.get("/api/history")
        assert [s["content"] for s in history.json()] == ["A different body"]

    @pytest.mark.parametrize("summary_type", ["EXECUTIVE", "TECHNICAL", "BULLET_POINTS"])
    async def test_keeps_summary_type(self, client, summary_type):
        response = await client.post(
            "/api/history", json={**SAVED, "summaryType": summary_type}
        )

        assert response.json()["summaryType"] == summary_type

    async def test_unknown_summary_type_rejected(self, client):
        response = await client.post("/api/history", json={**SAVED, "summaryType": "WEIRD"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid summary data"

    @pytest.mark.parametrize(
        "field,length",
        [("id", 65), ("title", 501), ("documentName", 501)],
    )
    async def test_overlong_fields_rejected(self, client, field, length):
        response = await client.post("/api/history", json={**SAVED, field: "x" * length})
        assert response.status_code == 400

    @pytest.mark.parametrize(
        "body",
        [
            [],
            "just a string",
            42,
            {"content": 5},
            {"content": "x", "wordCount": "many"},
            {"content": "x", "createdAt": "yesterday"},
        ],
    )
    async def test_malformed_body_is_400(self, client, body):
        response = await client.post("/api/history", json=body)

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid summary data"


class TestHistoryOwnership:
    """Tests for summary IDs shared between different owners."""

    async def test_other_users_id_is_conflict(self, client):
        alice = await _sign_in(client, "alice@example.com")
        bob = await _sign_in(client, "bob@example.com")
        await client.post(
            "/api/history", json={**SAVED, "id": "shared", "content": "alice secret"}, headers=alice
        )

        response = await client.post(
            "/api/history", json={**SAVED, "id": "shared", "content": "bob text"}, headers=bob
        )

        assert response.status_code == 409
        assert "alice secret" not in response.text

    async def test_conflict_leaves_original_untouched(self, client):
        alice = await _sign_in(client, "alice@example.com")
        bob = await _sign_in(client, "bob@example.com")
        await client.post(
            "/api/history", json={**SAVED, "id": "shared", "content": "alice secret"}, headers=alice
        )
        await client.post(
            "/api/history", json={**SAVED, "id": "shared", "content": "bob text"}, headers=bob
        )

        alice_history = await client.get("/api/history", headers=alice)
        bob_history = await client.get("/api/history", headers=bob)

        assert [s["content"] for s in alice_history.json()] == ["alice secret"]
        assert bob_history.json() == []

    async def test_anonymous_cannot_overwrite_signed_in_summary(self, client):
        alice = await _sign_in(client, "alice@example.com")
        await client.post("/api/history", json={**SAVED, "id": "shared"}, headers=alice)

        response = await client.post(
            "/api/history", json={**SAVED, "id": "shared", "content": "anon text"}
        )

        assert response.status_code == 409
