"""
Cultural Intelligence Agent — the interaction evaluator.

Grades one free-text user utterance against the target culture's knowledge
base and the active scenario template.

Behavioral Contract:
- Accepts the active scenario, the utterance, the user profile, the
  scenario's culture, the system settings and the scenario template
- Observes: lowercases the utterance and records every aspect whose
  keyword is a substring of it (plain containment, no word boundaries,
  so "late" also fires inside "chocolate")
- Decides: walks a fixed priority table and stops at the first branch
  that applies
- Packages: returns a frozen InteractionFeedback carrying a deep copy of
  the profile
- Never writes scenario or profile state; the only side effect is the
  best-effort token grant when the impact clears the reward threshold
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from cultural_advisor.audit.log import AuditLog, AuditSeverity
from cultural_advisor.errors import PreconditionViolation
from cultural_advisor.models.culture import (
    CulturalProfile,
    EtiquetteCategory,
    EtiquetteRule,
    FeedbackSeverity,
)
from cultural_advisor.models.feedback import (
    Decision,
    DetailedFeedbackDimension,
    FeedbackSummary,
    InteractionFeedback,
    Observation,
    UserIntent,
)
from cultural_advisor.models.reward import RewardRecord
from cultural_advisor.models.scenario import ActiveScenarioInstance, ScenarioTemplate
from cultural_advisor.models.settings import AIPersona, SimulatorConfig, SystemSettings
from cultural_advisor.models.user import UserProfile
from cultural_advisor.rewards.issuer import RewardIssuer

logger = logging.getLogger(__name__)


PERSONA_PREFIXES: Dict[AIPersona, str] = {
    AIPersona.SUPPORTIVE: "That's an interesting approach. Let's see... ",
    AIPersona.CHALLENGING: "Consider your strategy carefully. ",
    AIPersona.FORMAL_ADVISOR: "Analyzing your input, the cultural implications are as follows: ",
    AIPersona.NEUTRAL: "Processing your action. ",
}

# Category-bearing aspects (etiquette rules, social norms) that steer intent
_CATEGORY_INTENTS: Dict[str, UserIntent] = {
    EtiquetteCategory.GREETING.value: UserIntent.SOCIAL_GREETING,
    EtiquetteCategory.CONVERSATION.value: UserIntent.SOCIAL_GREETING,
    EtiquetteCategory.DINING.value: UserIntent.DINING_ETIQUETTE,
    EtiquetteCategory.BUSINESS_MEETING.value: UserIntent.BUSINESS_NEGOTIATION,
}

# Rule branches, in priority order. Templates take {rule}, {category},
# {description} and {culture}.
_RULE_BRANCHES = [
    {
        "severity": FeedbackSeverity.CRITICAL,
        "impact": -25,
        "score": -5,
        "framing": "The atmosphere shifts dramatically.",
        "summary": "Critical: {rule} violation.",
        "explanation": "{description} This action is a severe cultural taboo in {culture}.",
        "recommendation": "Avoid this action in {culture}.",
        "suggest_modules": True,
    },
    {
        "severity": FeedbackSeverity.NEGATIVE,
        "impact": -10,
        "score": -3,
        "framing": "There's a noticeable, subtle shift in the interaction.",
        "summary": "Negative: {rule} might be perceived poorly.",
        "explanation": "{description} This can lead to misunderstandings.",
        "recommendation": "Be mindful of {category} in {culture}.",
        "suggest_modules": False,
    },
    {
        "severity": FeedbackSeverity.POSITIVE,
        "impact": 15,
        "score": 4,
        "framing": "Your counterparts react positively.",
        "summary": "Positive: Well-aligned with {category} etiquette.",
        "explanation": "{description} Your action was culturally appropriate.",
        "recommendation": "Continue to apply this principle in {culture}.",
        "suggest_modules": False,
    },
]


def _mentions(text: str, keywords: List[str]) -> bool:
    """True if any keyword occurs in text. Keywords are already lowercase."""
    return any(k in text for k in keywords)


def _mentions_phrase(text: str, phrases: List[str]) -> bool:
    return any(p.lower() in text for p in phrases)


def _first_rule_with(
    rules: List[EtiquetteRule], severity: FeedbackSeverity
) -> Optional[EtiquetteRule]:
    return next((r for r in rules if r.severity == severity), None)


class CulturalIntelligenceAgent:
    """
    Observe → decide → package, once per utterance.

    Stateless apart from its collaborators; one instance serves every
    scenario.
    """

    def __init__(
        self,
        reward_issuer: Optional[RewardIssuer] = None,
        config: Optional[SimulatorConfig] = None,
        audit_log: Optional[AuditLog] = None,
    ):
        self.rewards = reward_issuer or RewardIssuer(audit_log)
        self.config = config or SimulatorConfig()
        self.audit_log = audit_log

    def observe(
        self,
        utterance: str,
        culture: CulturalProfile,
        template: ScenarioTemplate,
    ) -> Observation:
        """Collect matched aspect ids and infer the utterance's intent."""
        text = utterance.lower()
        identified: List[str] = []
        intent = UserIntent.GENERAL_INTERACTION

        # Later matches override earlier ones
        for aspect in culture.iter_aspects():
            if not _mentions(text, aspect.keywords):
                continue
            identified.append(aspect.id)
            if aspect.kind in ("etiquette_rule", "social_norm"):
                intent = _CATEGORY_INTENTS.get(aspect.category.value, intent)
            elif aspect.kind == "negotiation_practice":
                intent = UserIntent.BUSINESS_NEGOTIATION

        if _mentions_phrase(text, template.possible_user_actions):
            intent = UserIntent.POSITIVE_ACTION
        if _mentions_phrase(text, template.possible_pitfalls):
            intent = UserIntent.POTENTIAL_PITFALL

        return Observation(user_intent=intent, identified_aspects=identified)

    def decide(
        self,
        utterance: str,
        observation: Observation,
        culture: CulturalProfile,
        settings: SystemSettings,
        template: ScenarioTemplate,
    ) -> Decision:
        """Grade the observation by the first branch that applies."""
        text = utterance.lower()
        prefix = PERSONA_PREFIXES[settings.ai_persona]
        matched_rules = [
            r for r in culture.etiquette_rules if _mentions(text, r.keywords)
        ]

        for branch in _RULE_BRANCHES:
            rule = _first_rule_with(matched_rules, branch["severity"])
            if rule is None:
                continue
            fields = {
                "rule": rule.rule,
                "category": rule.category.value,
                "description": rule.description,
                "culture": culture.name,
            }
            return Decision(
                ai_response=f"{prefix}{branch['framing']} {rule.description}",
                feedback_summary=FeedbackSummary(
                    text=branch["summary"].format(**fields),
                    severity=branch["severity"],
                ),
                detailed_feedback=[
                    DetailedFeedbackDimension(
                        dimension=f"{rule.category.value} Etiquette",
                        score=branch["score"],
                        explanation=branch["explanation"].format(**fields),
                        severity=branch["severity"],
                        recommendations=[branch["recommendation"].format(**fields)],
                    )
                ],
                competence_impact=branch["impact"],
                suggested_resources=(
                    list(template.related_learning_modules)
                    if branch["suggest_modules"]
                    else []
                ),
            )

        if observation.user_intent == UserIntent.POSITIVE_ACTION:
            return Decision(
                ai_response=f"{prefix}Your action is well-received. The interaction proceeds smoothly.",
                feedback_summary=FeedbackSummary(
                    text="Positive: Aligned with scenario objectives.",
                    severity=FeedbackSeverity.POSITIVE,
                ),
                detailed_feedback=[
                    DetailedFeedbackDimension(
                        dimension="Scenario Objective",
                        score=3,
                        explanation="You made a good choice, progressing the scenario positively.",
                        severity=FeedbackSeverity.POSITIVE,
                    )
                ],
                competence_impact=10,
            )

        if observation.user_intent == UserIntent.POTENTIAL_PITFALL:
            return Decision(
                ai_response=f"{prefix}A moment of awkwardness. Your action might have unintended consequences.",
                feedback_summary=FeedbackSummary(
                    text="Advisory: A potential cultural pitfall was approached.",
                    severity=FeedbackSeverity.ADVISORY,
                ),
                detailed_feedback=[
                    DetailedFeedbackDimension(
                        dimension="Scenario Pitfall",
                        score=-2,
                        explanation="Your action touched upon a known cultural pitfall.",
                        severity=FeedbackSeverity.ADVISORY,
                    )
                ],
                competence_impact=-5,
            )

        return Decision(
            ai_response=f"{prefix}I understand your input. Let's see how the interaction evolves.",
            feedback_summary=FeedbackSummary(
                text="Neutral: No strong cultural implications detected.",
                severity=FeedbackSeverity.NEUTRAL,
            ),
            detailed_feedback=[
                DetailedFeedbackDimension(
                    dimension="General Interaction",
                    score=0,
                    explanation="Your action was generally acceptable.",
                    severity=FeedbackSeverity.NEUTRAL,
                )
            ],
            competence_impact=0,
        )

    def evaluate(
        self,
        user_id: str,
        scenario: ActiveScenarioInstance,
        utterance: str,
        user_profile: UserProfile,
        culture: CulturalProfile,
        settings: SystemSettings,
        template: ScenarioTemplate,
    ) -> InteractionFeedback:
        """
        Evaluate one utterance and return the feedback packet.

        Raises PreconditionViolation if any input is missing. The caller is
        responsible for passing the culture embedded in the scenario.
        """
        for resource, value in (
            ("scenario", scenario),
            ("user profile", user_profile),
            ("culture", culture),
            ("system settings", settings),
            ("scenario template", template),
        ):
            if value is None:
                raise PreconditionViolation(resource)
        utterance = utterance or ""

        observation = self.observe(utterance, culture, template)
        decision = self.decide(utterance, observation, culture, settings, template)
        logger.debug(
            "Evaluated utterance for %s: intent=%s aspects=%s severity=%s",
            user_id,
            observation.user_intent.value,
            observation.identified_aspects,
            decision.feedback_summary.severity.value,
        )

        return InteractionFeedback(
            user_action=utterance,
            ai_response=decision.ai_response,
            feedback_summary=decision.feedback_summary,
            timestamp=datetime.utcnow(),
            scenario_id=scenario.instance_id,
            target_culture_id=scenario.target_culture.id,
            user_profile_snapshot=user_profile.model_copy(deep=True),
            detailed_feedback=decision.detailed_feedback,
            overall_cultural_competence_impact=decision.competence_impact,
            suggested_resources=decision.suggested_resources or None,
            potential_rewards_earned=self._issue_rewards(
                user_id, decision.competence_impact
            ),
        )

    def _issue_rewards(self, user_id: str, impact: int) -> Optional[List[RewardRecord]]:
        """Grant tokens for a strong positive impact. Failures are logged and dropped."""
        if impact <= self.config.reward_impact_threshold:
            return None
        amount = impact // self.config.tokens_per_impact_point
        try:
            reward = self.rewards.issue_tokens(
                user_id, amount, "Positive cultural interaction"
            )
        except Exception as e:
            logger.exception("Token issuance failed for %s (impact %d)", user_id, impact)
            if self.audit_log is not None:
                self.audit_log.record(
                    user_id,
                    "REWARD_ISSUE_FAILED",
                    {"impact": impact, "error": str(e)},
                    AuditSeverity.ERROR,
                )
            return None
        return [reward]
