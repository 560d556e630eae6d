"""Interaction Feedback — the agent's graded verdict on one user utterance."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from cultural_advisor.models.culture import FeedbackSeverity
from cultural_advisor.models.reward import RewardRecord
from cultural_advisor.models.user import UserProfile


class UserIntent(str, Enum):
    SOCIAL_GREETING = "social_greeting"
    DINING_ETIQUETTE = "dining_etiquette"
    BUSINESS_NEGOTIATION = "business_negotiation"
    POSITIVE_ACTION = "positive_action"
    POTENTIAL_PITFALL = "potential_pitfall"
    GENERAL_INTERACTION = "general_interaction"


class FeedbackSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    severity: FeedbackSeverity


class DetailedFeedbackDimension(BaseModel):
    model_config = ConfigDict(frozen=True)

    dimension: str                          # e.g. "Dining Etiquette"
    score: int                              # Signed, -5..+4
    explanation: str
    severity: FeedbackSeverity
    recommendations: List[str] = []


class Observation(BaseModel):
    """Stage 1 output: what the utterance touched."""

    user_intent: UserIntent = UserIntent.GENERAL_INTERACTION
    identified_aspects: List[str] = []


class Decision(BaseModel):
    """Stage 2 output: how the counterparts react and how it is graded."""

    ai_response: str
    feedback_summary: FeedbackSummary
    detailed_feedback: List[DetailedFeedbackDimension]
    competence_impact: int
    suggested_resources: List[str] = []


class InteractionFeedback(BaseModel):
    """
    The packet returned for every processed interaction.

    Immutable once built. The user profile is a deep copy taken at evaluation
    time so later profile changes never rewrite it.
    """

    model_config = ConfigDict(frozen=True)

    user_action: str
    ai_response: str
    feedback_summary: FeedbackSummary
    timestamp: datetime
    scenario_id: str
    target_culture_id: str
    user_profile_snapshot: UserProfile
    detailed_feedback: List[DetailedFeedbackDimension]
    overall_cultural_competence_impact: int
    suggested_resources: Optional[List[str]] = None
    potential_rewards_earned: Optional[List[RewardRecord]] = None
