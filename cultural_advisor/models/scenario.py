"""Scenario Template and the running Scenario Instance built from it."""

from datetime import datetime
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

from cultural_advisor.models.culture import CulturalProfile


class ScenarioCategory(str, Enum):
    BUSINESS = "Business"
    SOCIAL = "Social"
    ACADEMIC = "Academic"
    PERSONAL = "Personal"
    DIPLOMACY = "Diplomacy"


class ScenarioDifficulty(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class ScenarioTemplate(BaseModel):
    """Static roleplay definition. Objectives double as keys of the completion map."""

    id: str
    title: str
    description: str = ""
    category: ScenarioCategory = ScenarioCategory.BUSINESS
    difficulty: ScenarioDifficulty = ScenarioDifficulty.BEGINNER
    objectives: List[str]
    initial_situation: str
    key_cultural_aspects: List[str] = []    # Aspect ids or dimension names
    possible_user_actions: List[str] = []   # Curated "positive action" phrases
    possible_pitfalls: List[str] = []       # Curated pitfall phrases
    related_learning_modules: List[str] = []

    @field_validator("objectives")
    @classmethod
    def _check_unique_objectives(cls, value: List[str]) -> List[str]:
        if len(set(value)) != len(value):
            raise ValueError("Scenario objectives must be unique")
        return value


class Participant(BaseModel):
    name: str
    role: str
    cultural_background: str


class ActiveScenarioInstance(BaseModel):
    """A running roleplay session. Owned by the ScenarioStore."""

    instance_id: str
    scenario_template_id: str
    user_id: str
    target_culture: CulturalProfile         # Snapshot taken at start
    current_situation: str
    objective_status: Dict[str, bool]
    participants: List[Participant] = []
    current_turn: int = Field(ge=0, default=0)
    max_turns: int = Field(ge=1, default=10)
    is_completed: bool = False
    success_metric: int = Field(ge=0, le=100, default=50)
    started_at: datetime
