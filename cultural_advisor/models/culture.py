"""Cultural Profile — the per-culture knowledge base the agent matches against."""

from enum import Enum
from typing import Annotated, Dict, Iterator, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator


class FeedbackSeverity(str, Enum):
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"
    CRITICAL = "Critical"
    ADVISORY = "Advisory"


class EtiquetteCategory(str, Enum):
    GREETING = "Greeting"
    DINING = "Dining"
    BUSINESS_MEETING = "Business Meeting"
    GIFT_GIVING = "Gift Giving"
    SOCIAL = "Social"
    DRESS_CODE = "Dress Code"
    GENERAL = "General"
    CONVERSATION = "Conversation"


class NegotiationAspect(str, Enum):
    PREPARATION = "Preparation"
    PROCESS = "Process"
    DECISION_MAKING = "Decision Making"
    RELATIONSHIP_BUILDING = "Relationship Building"
    STRATEGY = "Strategy"
    COMMUNICATION = "Communication"


class SocialNormCategory(str, Enum):
    CONVERSATION = "Conversation"
    PERSONAL_SPACE = "Personal Space"
    HOSPITALITY = "Hospitality"
    PUBLIC_BEHAVIOR = "Public Behavior"
    FAMILY = "Family"
    RESPECT = "Respect"


class NonVerbalCueType(str, Enum):
    EYE_CONTACT = "Eye Contact"
    GESTURES = "Gestures"
    PERSONAL_SPACE = "Personal Space"
    TOUCH = "Touch"
    FACIAL_EXPRESSION = "Facial Expression"
    POSTURE = "Posture"
    VOCALICS = "Vocalics"
    SILENCE = "Silence"


class CueInterpretation(str, Enum):
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


class _TaggedAspect(BaseModel):
    """Fields every knowledge-base fact shares: identity, text and match keywords."""

    id: str
    description: str
    keywords: List[str] = []                # Empty list → never matched by text scan

    @field_validator("keywords")
    @classmethod
    def _normalize_keywords(cls, value: List[str]) -> List[str]:
        normalized = [k.strip().lower() for k in value]
        return [k for k in normalized if k]


class EtiquetteRule(_TaggedAspect):
    kind: Literal["etiquette_rule"] = "etiquette_rule"
    category: EtiquetteCategory
    rule: str
    consequences: FeedbackSeverity
    example: Optional[str] = None

    @property
    def severity(self) -> FeedbackSeverity:
        return self.consequences


class NegotiationPractice(_TaggedAspect):
    kind: Literal["negotiation_practice"] = "negotiation_practice"
    aspect: NegotiationAspect
    practice: str
    cultural_basis: str = ""
    consequences: FeedbackSeverity = FeedbackSeverity.NEUTRAL

    @property
    def severity(self) -> FeedbackSeverity:
        return self.consequences


class SocialNorm(_TaggedAspect):
    kind: Literal["social_norm"] = "social_norm"
    category: SocialNormCategory
    norm: str
    avoid: Optional[str] = None
    consequences: FeedbackSeverity = FeedbackSeverity.NEUTRAL

    @property
    def severity(self) -> FeedbackSeverity:
        return self.consequences


class CommonMisunderstanding(_TaggedAspect):
    kind: Literal["misunderstanding"] = "misunderstanding"
    topic: str
    cultural_difference: str = ""
    advice: str = ""
    consequences: FeedbackSeverity = FeedbackSeverity.NEUTRAL

    @property
    def severity(self) -> FeedbackSeverity:
        return self.consequences


class NonVerbalCue(_TaggedAspect):
    kind: Literal["non_verbal_cue"] = "non_verbal_cue"
    cue_type: NonVerbalCueType
    cue: str
    meaning: str = ""
    interpretation: CueInterpretation = CueInterpretation.NEUTRAL
    caution: Optional[str] = None

    @property
    def severity(self) -> FeedbackSeverity:
        return FeedbackSeverity(self.interpretation.value)


CulturalAspect = Annotated[
    Union[
        EtiquetteRule,
        NegotiationPractice,
        SocialNorm,
        CommonMisunderstanding,
        NonVerbalCue,
    ],
    Field(discriminator="kind"),
]


class CommunicationStyle(BaseModel):
    directness: int = Field(ge=0, le=100)
    context_sensitivity: int = Field(ge=0, le=100)
    formality_level: int = Field(ge=0, le=100)
    emotional_expression: int = Field(ge=0, le=100)


class CulturalProfile(BaseModel):
    """
    One culture's knowledge base entry.

    Loaded once and treated as read-only afterwards. Scenario instances hold
    their own deep copy, so editing a profile never rewrites past sessions.
    """

    id: str
    name: str
    continent: str                          # Region label, e.g. "Europe"
    language: str
    hello_phrase: str = ""
    goodbye_phrase: str = ""
    cultural_dimensions: Dict[str, int] = {}   # e.g. {"power_distance": 35}
    communication_style: CommunicationStyle
    etiquette_rules: List[EtiquetteRule] = []
    negotiation_practices: List[NegotiationPractice] = []
    social_norms: List[SocialNorm] = []
    common_misunderstandings: List[CommonMisunderstanding] = []
    non_verbal_cues: List[NonVerbalCue] = []
    values: List[str] = []

    @field_validator("cultural_dimensions")
    @classmethod
    def _check_dimension_scores(cls, value: Dict[str, int]) -> Dict[str, int]:
        for dimension, score in value.items():
            if not 0 <= score <= 100:
                raise ValueError(
                    f"Dimension '{dimension}' score {score} outside [0, 100]"
                )
        return value

    @model_validator(mode="after")
    def _check_unique_aspect_ids(self) -> "CulturalProfile":
        seen = set()
        for aspect in self.iter_aspects():
            if aspect.id in seen:
                raise ValueError(
                    f"Duplicate aspect id '{aspect.id}' in culture '{self.id}'"
                )
            seen.add(aspect.id)
        return self

    def iter_aspects(self) -> Iterator[CulturalAspect]:
        """Yield every aspect in fixed collection order."""
        yield from self.etiquette_rules
        yield from self.negotiation_practices
        yield from self.social_norms
        yield from self.common_misunderstandings
        yield from self.non_verbal_cues

    def get_aspect(self, aspect_id: str) -> Optional[CulturalAspect]:
        return next((a for a in self.iter_aspects() if a.id == aspect_id), None)
