"""Cultural Advisor data models."""

from cultural_advisor.models.culture import (
    CommonMisunderstanding,
    CommunicationStyle,
    CueInterpretation,
    CulturalAspect,
    CulturalProfile,
    EtiquetteCategory,
    EtiquetteRule,
    FeedbackSeverity,
    NegotiationAspect,
    NegotiationPractice,
    NonVerbalCue,
    NonVerbalCueType,
    SocialNorm,
    SocialNormCategory,
)
from cultural_advisor.models.feedback import (
    Decision,
    DetailedFeedbackDimension,
    FeedbackSummary,
    InteractionFeedback,
    Observation,
    UserIntent,
)
from cultural_advisor.models.learning import LearningModule, LearningModuleCategory
from cultural_advisor.models.reward import RewardRecord
from cultural_advisor.models.scenario import (
    ActiveScenarioInstance,
    Participant,
    ScenarioCategory,
    ScenarioDifficulty,
    ScenarioTemplate,
)
from cultural_advisor.models.settings import (
    AIPersona,
    FeedbackVerbosity,
    LLMModelPreference,
    NotificationPreferences,
    SimulatorConfig,
    SystemSettings,
)
from cultural_advisor.models.user import (
    LearningProgress,
    ScenarioHistoryEntry,
    UserProfile,
)

__all__ = [
    "AIPersona",
    "ActiveScenarioInstance",
    "CommonMisunderstanding",
    "CommunicationStyle",
    "CueInterpretation",
    "CulturalAspect",
    "CulturalProfile",
    "Decision",
    "DetailedFeedbackDimension",
    "EtiquetteCategory",
    "EtiquetteRule",
    "FeedbackSeverity",
    "FeedbackSummary",
    "FeedbackVerbosity",
    "InteractionFeedback",
    "LLMModelPreference",
    "LearningModule",
    "LearningModuleCategory",
    "LearningProgress",
    "NegotiationAspect",
    "NegotiationPractice",
    "NonVerbalCue",
    "NonVerbalCueType",
    "NotificationPreferences",
    "Observation",
    "Participant",
    "RewardRecord",
    "ScenarioCategory",
    "ScenarioDifficulty",
    "ScenarioHistoryEntry",
    "ScenarioTemplate",
    "SimulatorConfig",
    "SocialNorm",
    "SocialNormCategory",
    "SystemSettings",
    "UserIntent",
    "UserProfile",
]
