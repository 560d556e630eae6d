"""
Cultural Advisor API — FastAPI endpoints.

Exposes the simulator via a REST API for:
- Knowledge base browsing (cultures, scenario templates, learning modules)
- User profiles and system settings
- Scenario sessions and interactions
- Audit queries
"""

from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from cultural_advisor.agent.evaluator import CulturalIntelligenceAgent
from cultural_advisor.audit.log import AuditLog
from cultural_advisor.errors import PreconditionViolation, ScenarioCompletedError
from cultural_advisor.knowledge import seed
from cultural_advisor.knowledge.base import KnowledgeBase
from cultural_advisor.models.settings import SimulatorConfig, SystemSettings
from cultural_advisor.models.user import UserProfile
from cultural_advisor.rewards.issuer import RewardIssuer
from cultural_advisor.sessions.store import ScenarioStore, UserProfileStore
from cultural_advisor.simulation.service import SimulationService


# --- Request Models ---

class StartScenarioRequest(BaseModel):
    user_id: str
    template_id: str
    culture_id: str


class InteractionRequest(BaseModel):
    user_id: str
    utterance: str


# --- Application Factory ---

def create_app(
    knowledge_base: Optional[KnowledgeBase] = None,
    profile_store: Optional[UserProfileStore] = None,
    scenario_store: Optional[ScenarioStore] = None,
    audit_log: Optional[AuditLog] = None,
    settings: Optional[SystemSettings] = None,
    config: Optional[SimulatorConfig] = None,
    reward_issuer: Optional[RewardIssuer] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Cultural Advisor API",
        description="Cross-cultural etiquette training simulator",
        version="0.1.0",
    )

    # Initialize components
    kb = knowledge_base or KnowledgeBase.default()
    ps = profile_store or UserProfileStore()
    ss = scenario_store or ScenarioStore()
    al = audit_log or AuditLog()
    cfg = config or SimulatorConfig()

    agent = CulturalIntelligenceAgent(
        reward_issuer=reward_issuer or RewardIssuer(al),
        config=cfg,
        audit_log=al,
    )
    service = SimulationService(
        knowledge_base=kb,
        scenario_store=ss,
        profile_store=ps,
        agent=agent,
        settings=settings,
        config=cfg,
        audit_log=al,
    )

    # Store components on app state for access in endpoints
    app.state.knowledge_base = kb
    app.state.profile_store = ps
    app.state.scenario_store = ss
    app.state.audit_log = al
    app.state.simulation = service

    # === KNOWLEDGE BASE ===

    @app.get("/cultures")
    def list_cultures():
        """All cultural profiles."""
        return [c.model_dump(mode="json") for c in kb.list_cultures()]

    @app.get("/cultures/{culture_id}")
    def get_culture(culture_id: str):
        """Get a specific cultural profile."""
        culture = kb.get_culture(culture_id)
        if not culture:
            raise HTTPException(404, "Culture not found")
        return culture.model_dump(mode="json")

    @app.get("/scenarios/templates")
    def list_templates():
        """All scenario templates."""
        return [t.model_dump(mode="json") for t in kb.list_templates()]

    @app.get("/scenarios/templates/{template_id}")
    def get_template(template_id: str):
        """Get a specific scenario template."""
        template = kb.get_template(template_id)
        if not template:
            raise HTTPException(404, "Scenario template not found")
        return template.model_dump(mode="json")

    @app.get("/learning/modules")
    def list_learning_modules():
        """All learning modules."""
        return [m.model_dump(mode="json") for m in kb.list_learning_modules()]

    # === USERS & SETTINGS ===

    @app.get("/users/{user_id}")
    def get_user(user_id: str):
        """Get a user profile, including scenario history."""
        profile = ps.get(user_id)
        if not profile:
            raise HTTPException(404, "User not found")
        return profile.model_dump(mode="json")

    @app.get("/settings")
    def get_settings():
        """Current system settings."""
        return service.settings.model_dump(mode="json")

    @app.put("/settings")
    def update_settings(new_settings: SystemSettings):
        """Replace system settings."""
        return service.update_settings(new_settings).model_dump(mode="json")

    # === SCENARIOS ===

    @app.post("/scenarios")
    def start_scenario(req: StartScenarioRequest):
        """Start a scenario instance."""
        try:
            instance = service.start_scenario(req.user_id, req.template_id, req.culture_id)
        except PreconditionViolation as e:
            raise HTTPException(404, e.detail)
        return {"id": instance.instance_id, "scenario": instance.model_dump(mode="json")}

    @app.get("/scenarios/{instance_id}")
    def get_scenario(instance_id: str):
        """Current state of a scenario instance."""
        instance = service.get_active_scenario(instance_id)
        if not instance:
            raise HTTPException(404, "Scenario not found")
        return instance.model_dump(mode="json")

    @app.post("/scenarios/{instance_id}/interactions")
    def process_interaction(instance_id: str, req: InteractionRequest):
        """Evaluate one utterance and advance the scenario."""
        try:
            feedback = service.process_interaction(req.user_id, instance_id, req.utterance)
        except ScenarioCompletedError as e:
            raise HTTPException(409, e.detail)
        except PreconditionViolation as e:
            raise HTTPException(404, e.detail)
        return feedback.model_dump(mode="json")

    @app.get("/scenarios/{instance_id}/transcript")
    def get_transcript(instance_id: str):
        """All feedback produced for a scenario so far."""
        try:
            transcript = service.get_transcript(instance_id)
        except PreconditionViolation as e:
            raise HTTPException(404, e.detail)
        return [f.model_dump(mode="json") for f in transcript]

    # === AUDIT ===

    @app.get("/audit")
    def get_audit(limit: int = Query(50, ge=1), user_id: Optional[str] = None):
        """Recent audit entries, optionally for a single user."""
        if user_id:
            entries = al.query_by_user(user_id)[-limit:]
        else:
            entries = al.query_recent(limit=limit)
        return [e.model_dump(mode="json") for e in entries]

    return app


def _seeded_app() -> FastAPI:
    profiles = [UserProfile.model_validate(p) for p in seed.USER_PROFILES]
    return create_app(
        knowledge_base=KnowledgeBase.default(),
        profile_store=UserProfileStore(profiles),
        settings=SystemSettings.model_validate(seed.SYSTEM_SETTINGS),
    )


# Default application instance
app = _seeded_app()
