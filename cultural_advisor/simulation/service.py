"""
Simulation Service — runs roleplay sessions end to end.

Starts scenario instances, routes each utterance through the agent, applies
the resulting state transition, and files a history entry when a scenario
runs out of turns.

States per instance:
  STARTED → (INTERACTION → ADVANCED)* → COMPLETED
"""

import logging
from datetime import datetime
from typing import List, Optional
from uuid import uuid4

from cultural_advisor.agent.evaluator import CulturalIntelligenceAgent
from cultural_advisor.audit.log import AuditLog, AuditSeverity
from cultural_advisor.errors import PreconditionViolation, ScenarioCompletedError
from cultural_advisor.knowledge.base import KnowledgeBase
from cultural_advisor.models.feedback import InteractionFeedback
from cultural_advisor.models.reward import RewardRecord
from cultural_advisor.models.scenario import (
    ActiveScenarioInstance,
    Participant,
    ScenarioTemplate,
)
from cultural_advisor.models.settings import SimulatorConfig, SystemSettings
from cultural_advisor.models.user import ScenarioHistoryEntry
from cultural_advisor.sessions.store import ScenarioStore, UserProfileStore
from cultural_advisor.sessions.transition import advance_scenario

logger = logging.getLogger(__name__)


def _key_learnings(transcript: List[InteractionFeedback]) -> List[str]:
    """Distinct recommendations from a transcript, in the order first given."""
    learnings: List[str] = []
    for feedback in transcript:
        for dimension in feedback.detailed_feedback:
            for recommendation in dimension.recommendations:
                if recommendation not in learnings:
                    learnings.append(recommendation)
    return learnings


class SimulationService:
    """
    Composition of knowledge base, stores, agent and audit log.
    Every collaborator is injected; nothing is read from module globals.
    """

    def __init__(
        self,
        knowledge_base: KnowledgeBase,
        scenario_store: ScenarioStore,
        profile_store: UserProfileStore,
        agent: Optional[CulturalIntelligenceAgent] = None,
        settings: Optional[SystemSettings] = None,
        config: Optional[SimulatorConfig] = None,
        audit_log: Optional[AuditLog] = None,
    ):
        self.knowledge = knowledge_base
        self.scenarios = scenario_store
        self.profiles = profile_store
        self.config = config or SimulatorConfig()
        self.audit_log = audit_log or AuditLog()
        self.agent = agent or CulturalIntelligenceAgent(
            config=self.config, audit_log=self.audit_log
        )
        self._settings = settings or SystemSettings()

    @property
    def settings(self) -> SystemSettings:
        """Current system settings."""
        return self._settings

    def update_settings(self, settings: SystemSettings) -> SystemSettings:
        """Replace the system settings. Applies from the next interaction."""
        self._settings = settings
        return settings

    def start_scenario(
        self, user_id: str, template_id: str, culture_id: str
    ) -> ActiveScenarioInstance:
        """Create a new scenario instance for a user against a target culture."""
        template = self.knowledge.require_template(template_id)
        culture = self.knowledge.require_culture(culture_id)
        profile = self.profiles.require(user_id)

        instance = ActiveScenarioInstance(
            instance_id=f"scenario_{uuid4().hex[:12]}",
            scenario_template_id=template.id,
            user_id=user_id,
            target_culture=culture.model_copy(deep=True),
            current_situation=template.initial_situation,
            objective_status={objective: False for objective in template.objectives},
            participants=[
                Participant(
                    name=profile.username,
                    role="User",
                    cultural_background=profile.origin_culture_id,
                )
            ],
            current_turn=0,
            max_turns=self.config.max_turns,
            is_completed=False,
            success_metric=self.config.initial_success_metric,
            started_at=datetime.utcnow(),
        )
        self.scenarios.create(instance)

        self.audit_log.record(user_id, "SCENARIO_STARTED", {
            "instance_id": instance.instance_id,
            "scenario_template_id": template.id,
            "target_culture_id": culture.id,
        })
        logger.info(
            "Started scenario %s (%s / %s) for %s",
            instance.instance_id, template.id, culture.id, user_id,
        )
        return instance

    def get_active_scenario(self, instance_id: str) -> Optional[ActiveScenarioInstance]:
        """Get a scenario instance by ID."""
        return self.scenarios.get(instance_id)

    def get_transcript(self, instance_id: str) -> List[InteractionFeedback]:
        """All feedback packets produced for an instance."""
        self.scenarios.require(instance_id)
        return self.scenarios.get_transcript(instance_id)

    def process_interaction(
        self, user_id: str, instance_id: str, utterance: str
    ) -> InteractionFeedback:
        """
        Evaluate one utterance and advance the scenario.

        Holds the instance lock across evaluate + transition + update so two
        interactions on one instance never interleave. Only the user who
        started the instance may play it; anyone else sees it as missing.
        """
        with self.scenarios.lock(instance_id):
            scenario = self.scenarios.require(instance_id)
            if scenario.user_id != user_id:
                raise PreconditionViolation("scenario", instance_id)
            if scenario.is_completed:
                raise ScenarioCompletedError(instance_id)
            profile = self.profiles.require(user_id)
            template = self.knowledge.require_template(scenario.scenario_template_id)

            feedback = self.agent.evaluate(
                user_id=user_id,
                scenario=scenario,
                utterance=utterance,
                user_profile=profile,
                culture=scenario.target_culture,
                settings=self._settings,
                template=template,
            )

            updated = advance_scenario(scenario, feedback, template)
            self.scenarios.update(updated)
            self.scenarios.append_feedback(instance_id, feedback)

            self.audit_log.record(user_id, "INTERACTION_PROCESSED", {
                "instance_id": instance_id,
                "turn": updated.current_turn,
                "severity": feedback.feedback_summary.severity.value,
                "impact": feedback.overall_cultural_competence_impact,
                "success_metric": updated.success_metric,
            })
            logger.info(
                "Scenario %s turn %d: %s (%+d) → success metric %d",
                instance_id,
                updated.current_turn,
                feedback.feedback_summary.severity.value,
                feedback.overall_cultural_competence_impact,
                updated.success_metric,
            )

            if updated.is_completed:
                self._record_completion(user_id, updated, template)

        return feedback

    def _record_completion(
        self,
        user_id: str,
        scenario: ActiveScenarioInstance,
        template: ScenarioTemplate,
    ) -> None:
        """File the history entry, granting a certificate for a strong finish."""
        transcript = self.scenarios.get_transcript(scenario.instance_id)

        reward = self._grant_completion_certificate(user_id, scenario)
        if reward is None:
            for feedback in reversed(transcript):
                if feedback.potential_rewards_earned:
                    reward = feedback.potential_rewards_earned[-1]
                    break

        entry = ScenarioHistoryEntry(
            scenario_instance_id=scenario.instance_id,
            scenario_template_id=template.id,
            target_culture_id=scenario.target_culture.id,
            completion_date=datetime.utcnow(),
            final_success_metric=scenario.success_metric,
            total_interactions=len(transcript),
            key_learnings=_key_learnings(transcript),
            reward_triggered=reward,
        )
        self.profiles.append_history(user_id, entry)

        self.audit_log.record(user_id, "SCENARIO_COMPLETED", {
            "instance_id": scenario.instance_id,
            "final_success_metric": scenario.success_metric,
            "total_interactions": len(transcript),
        })
        logger.info(
            "Scenario %s completed for %s with success metric %d",
            scenario.instance_id, user_id, scenario.success_metric,
        )

    def _grant_completion_certificate(
        self, user_id: str, scenario: ActiveScenarioInstance
    ) -> Optional[RewardRecord]:
        if scenario.success_metric < self.config.certificate_success_threshold:
            return None
        certificate_type = f"{scenario.scenario_template_id}:{scenario.target_culture.id}"
        try:
            return self.agent.rewards.grant_certificate(user_id, certificate_type)
        except Exception as e:
            logger.exception("Certificate grant failed for %s", user_id)
            self.audit_log.record(
                user_id,
                "REWARD_ISSUE_FAILED",
                {"certificate_type": certificate_type, "error": str(e)},
                AuditSeverity.ERROR,
            )
            return None
