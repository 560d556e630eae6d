"""System settings (user-facing) and simulator configuration (operator-facing)."""

from enum import Enum

from pydantic import BaseModel, Field


class AIPersona(str, Enum):
    SUPPORTIVE = "supportive"
    CHALLENGING = "challenging"
    NEUTRAL = "neutral"
    FORMAL_ADVISOR = "formal_advisor"


class FeedbackVerbosity(str, Enum):
    CONCISE = "concise"
    DETAILED = "detailed"
    PEDAGOGICAL = "pedagogical"


class LLMModelPreference(str, Enum):
    DEFAULT = "default"
    FAST = "fast"
    DETAILED = "detailed"
    PEDAGOGICAL_MODE = "pedagogical_mode"
    RISK_AVERSE = "risk_averse"


class NotificationPreferences(BaseModel):
    email: bool = True
    in_app: bool = True
    scenario_recommendations: bool = True


class SystemSettings(BaseModel):
    """Presentation preferences. Only ai_persona changes agent output."""

    dark_mode: bool = False
    notification_preferences: NotificationPreferences = NotificationPreferences()
    llm_model_preference: LLMModelPreference = LLMModelPreference.DETAILED
    feedback_verbosity: FeedbackVerbosity = FeedbackVerbosity.PEDAGOGICAL
    ai_persona: AIPersona = AIPersona.SUPPORTIVE


class SimulatorConfig(BaseModel):
    """Configuration for scenario sessions and reward issuance."""

    max_turns: int = Field(ge=1, default=10)
    initial_success_metric: int = Field(ge=0, le=100, default=50)
    reward_impact_threshold: int = 10       # Tokens only when impact is strictly above
    tokens_per_impact_point: int = Field(ge=1, default=5)
    certificate_success_threshold: int = Field(ge=0, le=100, default=80)
