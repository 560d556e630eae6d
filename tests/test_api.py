"""Tests for the FastAPI API endpoints."""

import pytest
from fastapi.testclient import TestClient

from cultural_advisor.api.app import create_app
from cultural_advisor.audit.log import AuditLog
from cultural_advisor.knowledge import seed
from cultural_advisor.knowledge.base import KnowledgeBase
from cultural_advisor.models.settings import SimulatorConfig
from cultural_advisor.models.user import UserProfile
from cultural_advisor.sessions.store import UserProfileStore


@pytest.fixture
def client():
    """Create a test client with fresh components."""
    profiles = UserProfileStore([UserProfile.model_validate(p) for p in seed.USER_PROFILES])
    app = create_app(
        knowledge_base=KnowledgeBase.default(),
        profile_store=profiles,
        audit_log=AuditLog(db_path=":memory:"),
        config=SimulatorConfig(max_turns=2),
    )
    return TestClient(app)


def _start(client, template_id="SCEN001", culture_id="GERMANY"):
    response = client.post("/scenarios", json={
        "user_id": "user_alice",
        "template_id": template_id,
        "culture_id": culture_id,
    })
    assert response.status_code == 200
    return response.json()["id"]


class TestKnowledgeEndpoints:
    def test_list_cultures(self, client):
        response = client.get("/cultures")
        assert response.status_code == 200
        assert {c["id"] for c in response.json()} == {"GERMANY", "JAPAN", "USA"}

    def test_get_culture(self, client):
        response = client.get("/cultures/JAPAN")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Japan"
        assert data["etiquette_rules"][0]["kind"] == "etiquette_rule"

    def test_get_unknown_culture(self, client):
        assert client.get("/cultures/ATLANTIS").status_code == 404

    def test_templates(self, client):
        response = client.get("/scenarios/templates")
        assert len(response.json()) == 2
        assert client.get("/scenarios/templates/SCEN002").json()["category"] == "Social"
        assert client.get("/scenarios/templates/SCEN999").status_code == 404

    def test_learning_modules(self, client):
        response = client.get("/learning/modules")
        assert [m["id"] for m in response.json()] == ["LM001", "LM003"]


class TestUserAndSettingsEndpoints:
    def test_get_user(self, client):
        response = client.get("/users/user_alice")
        assert response.status_code == 200
        assert response.json()["username"] == "Alice Smith"

    def test_get_unknown_user(self, client):
        assert client.get("/users/user_bob").status_code == 404

    def test_update_settings(self, client):
        assert client.get("/settings").json()["ai_persona"] == "supportive"

        response = client.put("/settings", json={"ai_persona": "formal_advisor"})
        assert response.status_code == 200
        assert client.get("/settings").json()["ai_persona"] == "formal_advisor"

    def test_invalid_persona_rejected(self, client):
        response = client.put("/settings", json={"ai_persona": "sarcastic"})
        assert response.status_code == 422


class TestScenarioEndpoints:
    def test_start_scenario(self, client):
        instance_id = _start(client)
        response = client.get(f"/scenarios/{instance_id}")
        assert response.status_code == 200
        data = response.json()
        assert data["current_turn"] == 0
        assert data["success_metric"] == 50
        assert data["target_culture"]["id"] == "GERMANY"

    def test_start_with_unknown_template(self, client):
        response = client.post("/scenarios", json={
            "user_id": "user_alice",
            "template_id": "SCEN999",
            "culture_id": "GERMANY",
        })
        assert response.status_code == 404
        assert "SCEN999" in response.json()["detail"]

    def test_get_unknown_scenario(self, client):
        assert client.get("/scenarios/scenario_missing").status_code == 404

    def test_process_interaction(self, client):
        instance_id = _start(client)
        response = client.post(f"/scenarios/{instance_id}/interactions", json={
            "user_id": "user_alice",
            "utterance": "I arrive 20 minutes late without apology",
        })
        assert response.status_code == 200
        data = response.json()
        assert data["feedback_summary"]["severity"] == "Critical"
        assert data["overall_cultural_competence_impact"] == -25
        assert "LM001" in data["suggested_resources"]

        state = client.get(f"/scenarios/{instance_id}").json()
        assert state["current_turn"] == 1
        assert state["success_metric"] == 25

    def test_interaction_by_other_user(self, client):
        instance_id = _start(client)
        response = client.post(f"/scenarios/{instance_id}/interactions", json={
            "user_id": "user_bob",
            "utterance": "I look around the room",
        })
        assert response.status_code == 404
        assert client.get(f"/scenarios/{instance_id}").json()["current_turn"] == 0

    def test_interaction_unknown_scenario(self, client):
        response = client.post("/scenarios/scenario_missing/interactions", json={
            "user_id": "user_alice",
            "utterance": "hello",
        })
        assert response.status_code == 404

    def test_interaction_after_completion(self, client):
        instance_id = _start(client)
        for _ in range(2):
            client.post(f"/scenarios/{instance_id}/interactions", json={
                "user_id": "user_alice",
                "utterance": "I look around the room",
            })

        response = client.post(f"/scenarios/{instance_id}/interactions", json={
            "user_id": "user_alice",
            "utterance": "One more thing",
        })
        assert response.status_code == 409

        history = client.get("/users/user_alice").json()["scenario_history"]
        assert len(history) == 1
        assert history[0]["total_interactions"] == 2

    def test_transcript(self, client):
        instance_id = _start(client)
        client.post(f"/scenarios/{instance_id}/interactions", json={
            "user_id": "user_alice",
            "utterance": "I bring a bottle of wine",
        })
        response = client.get(f"/scenarios/{instance_id}/transcript")
        assert response.status_code == 200
        transcript = response.json()
        assert len(transcript) == 1
        assert transcript[0]["potential_rewards_earned"][0]["amount"] == 3

    def test_transcript_unknown_scenario(self, client):
        assert client.get("/scenarios/scenario_missing/transcript").status_code == 404


class TestAuditEndpoint:
    def test_audit_trail(self, client):
        instance_id = _start(client)
        client.post(f"/scenarios/{instance_id}/interactions", json={
            "user_id": "user_alice",
            "utterance": "I bring a bottle of wine",
        })
        actions = [e["action"] for e in client.get("/audit").json()]
        assert actions == [
            "SCENARIO_STARTED",
            "TOKEN_ISSUE_REQUEST",
            "INTERACTION_PROCESSED",
        ]

    def test_audit_by_user(self, client):
        _start(client)
        entries = client.get("/audit", params={"user_id": "user_bob"}).json()
        assert entries == []

    def test_audit_limit_applies_with_user_filter(self, client):
        for _ in range(3):
            _start(client)
        entries = client.get("/audit", params={"user_id": "user_alice", "limit": 2}).json()
        assert len(entries) == 2

    @pytest.mark.parametrize("limit", [0, -1])
    def test_audit_rejects_non_positive_limit(self, client, limit):
        _start(client)
        for params in ({"limit": limit}, {"limit": limit, "user_id": "user_alice"}):
            assert client.get("/audit", params=params).status_code == 422
