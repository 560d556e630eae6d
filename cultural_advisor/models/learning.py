"""Learning Module — reference material suggested after critical mistakes."""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class LearningModuleCategory(str, Enum):
    COMMUNICATION = "Communication"
    ETIQUETTE = "Etiquette"
    NEGOTIATION = "Negotiation"
    VALUES = "Values"
    HISTORY = "History"
    GENERAL = "General"
    NON_VERBAL = "Non-Verbal"


class LearningModule(BaseModel):
    id: str
    title: str
    category: LearningModuleCategory
    cultures_covered: List[str] = []
    content: str = ""
    estimated_completion_time_minutes: int = Field(ge=0, default=0)
    prerequisites: List[str] = []
