"""Tests for the HTTP API routes.

Covers:
- Scenario catalog listings
- Patient generation with and without filters
- Practice chat replies
- Session feedback
- Monthly session allowance (201 / 403)
"""

import pytest

from mi_coach.services.scenario_catalog import PATIENT_PROFILE_TEMPLATES

PROFILE_KEYS = {
    "name",
    "age",
    "sex",
    "background",
    "presentingProblem",
    "topic",
    "history",
    "chiefComplaint",
    "stageOfChange",
}


# =============================================================================
# Scenarios
# =============================================================================


class TestScenarios:
    @pytest.mark.asyncio
    async def test_topics(self, client):
        response = await client.get("/api/scenarios/topics")
        assert response.status_code == 200
        items = response.json()["items"]
        assert items == [t.topic for t in PATIENT_PROFILE_TEMPLATES]

    @pytest.mark.asyncio
    async def test_stages(self, client):
        response = await client.get("/api/scenarios/stages")
        assert response.status_code == 200
        items = response.json()["items"]
        assert [item["stage"] for item in items] == [
            "Precontemplation",
            "Contemplation",
            "Preparation",
            "Action",
            "Maintenance",
        ]
        assert all(item["description"] for item in items)

    @pytest.mark.asyncio
    async def test_difficulties(self, client):
        response = await client.get("/api/scenarios/difficulties")
        assert response.status_code == 200
        assert response.json() == {
            "Beginner": ["Preparation", "Action", "Maintenance"],
            "Intermediate": ["Contemplation"],
            "Advanced": ["Precontemplation"],
        }


# =============================================================================
# Patients
# =============================================================================


class TestGeneratePatient:
    @pytest.mark.asyncio
    async def test_no_body(self, client):
        response = await client.post("/api/patients/generate")
        assert response.status_code == 200
        assert set(response.json()) == PROFILE_KEYS

    @pytest.mark.asyncio
    async def test_with_filters(self, client):
        response = await client.post(
            "/api/patients/generate",
            json={
                "topic": "Cocaine Use",
                "stageOfChange": "Action",
                "difficulty": "Advanced",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["topic"] == "Cocaine Use"
        assert data["stageOfChange"] == "Action"
        assert 35 <= data["age"] <= 45
        assert "{age}" not in data["background"]

    @pytest.mark.asyncio
    async def test_difficulty_only(self, client):
        response = await client.post(
            "/api/patients/generate", json={"difficulty": "Intermediate"}
        )
        assert response.status_code == 200
        assert response.json()["stageOfChange"] == "Contemplation"

    @pytest.mark.asyncio
    async def test_unknown_topic_still_generates(self, client):
        response = await client.post(
            "/api/patients/generate", json={"topic": "Juggling"}
        )
        assert response.status_code == 200
        topics = {t.topic for t in PATIENT_PROFILE_TEMPLATES}
        assert response.json()["topic"] in topics

    @pytest.mark.asyncio
    async def test_invalid_stage_rejected(self, client):
        response = await client.post(
            "/api/patients/generate", json={"stageOfChange": "Denial"}
        )
        assert response.status_code == 422


# =============================================================================
# Chat
# =============================================================================


class TestChat:
    @pytest.mark.asyncio
    async def test_reply_with_patient(self, client, engineer_patient):
        response = await client.post(
            "/api/chat",
            json={
                "message": "How are you feeling?",
                "patient": engineer_patient.model_dump(mode="json", by_alias=True),
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["intent"] == "emotion"
        assert data["source"] == "mock"
        assert data["reply"].startswith("Honestly, I feel caught in the middle")

    @pytest.mark.asyncio
    async def test_reply_is_deterministic(self, client, engineer_patient):
        payload = {
            "message": "What gets in the way?",
            "patient": engineer_patient.model_dump(mode="json", by_alias=True),
        }
        first = await client.post("/api/chat", json=payload)
        second = await client.post("/api/chat", json=payload)
        assert first.json() == second.json()
        assert first.json()["intent"] == "barrier"

    @pytest.mark.asyncio
    async def test_reply_without_patient(self, client):
        response = await client.post("/api/chat", json={"message": "Hello there"})
        assert response.status_code == 200
        assert response.json()["reply"]

    @pytest.mark.asyncio
    async def test_generated_patient_round_trip(self, client):
        patient = (await client.post("/api/patients/generate")).json()
        response = await client.post(
            "/api/chat", json={"message": "Tell me more.", "patient": patient}
        )
        assert response.status_code == 200
        reply = response.json()["reply"].lower()
        assert reply
        assert "the patient" not in reply

    @pytest.mark.asyncio
    async def test_empty_message_rejected(self, client):
        response = await client.post("/api/chat", json={"message": ""})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_missing_message_rejected(self, client):
        response = await client.post("/api/chat", json={})
        assert response.status_code == 422


# =============================================================================
# Feedback
# =============================================================================


class TestFeedback:
    @pytest.mark.asyncio
    async def test_free_tier(self, client):
        response = await client.post(
            "/api/feedback",
            json={"transcript": [{"author": "user", "text": "What brings you in?"}]},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["analysisStatus"] == "complete"
        assert "whatWentRight" in data
        assert "empathyScore" not in data

    @pytest.mark.asyncio
    async def test_premium_tier(self, client):
        response = await client.post(
            "/api/feedback",
            json={
                "transcript": [{"author": "user", "text": "What brings you in?"}],
                "tier": "premium",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["empathyScore"] == 7
        assert data["keySkillsUsed"] == ["Open Questions", "Reflections", "Affirmations"]

    @pytest.mark.asyncio
    async def test_empty_transcript(self, client):
        response = await client.post("/api/feedback", json={"transcript": []})
        assert response.status_code == 200
        data = response.json()
        assert data["analysisStatus"] == "insufficient-data"
        assert data["analysisMessage"]

    @pytest.mark.asyncio
    async def test_invalid_author_rejected(self, client):
        response = await client.post(
            "/api/feedback",
            json={"transcript": [{"author": "doctor", "text": "Hi"}]},
        )
        assert response.status_code == 422


# =============================================================================
# Sessions
# =============================================================================


class TestSessions:
    @pytest.mark.asyncio
    async def test_allowance_fresh_user(self, client):
        response = await client.get(
            "/api/sessions/allowance", params={"user_id": "u1"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["remaining_free_sessions"] == 3
        assert data["can_start"] is True
        assert data["session_duration_seconds"] == 90

    @pytest.mark.asyncio
    async def test_allowance_premium(self, client):
        response = await client.get(
            "/api/sessions/allowance", params={"user_id": "u1", "tier": "premium"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["remaining_free_sessions"] is None
        assert data["session_duration_seconds"] == 300

    @pytest.mark.asyncio
    async def test_allowance_requires_user(self, client):
        response = await client.get("/api/sessions/allowance")
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_fourth_free_session_forbidden(self, client):
        for remaining in (2, 1, 0):
            response = await client.post("/api/sessions", json={"user_id": "u1"})
            assert response.status_code == 201
            assert response.json()["remaining_free_sessions"] == remaining

        response = await client.post("/api/sessions", json={"user_id": "u1"})
        assert response.status_code == 403
        assert "u1" in response.json()["detail"]

        allowance = await client.get(
            "/api/sessions/allowance", params={"user_id": "u1"}
        )
        assert allowance.json()["can_start"] is False

    @pytest.mark.asyncio
    async def test_premium_sessions_unlimited(self, client):
        for _ in range(5):
            response = await client.post(
                "/api/sessions", json={"user_id": "u2", "tier": "premium"}
            )
            assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_blank_user_rejected(self, client):
        response = await client.post("/api/sessions", json={"user_id": ""})
        assert response.status_code == 422
