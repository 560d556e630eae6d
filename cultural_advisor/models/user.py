"""User Profile — competence scores and completed scenario history."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from cultural_advisor.models.reward import RewardRecord


class LearningProgress(BaseModel):
    completed: bool = False
    score: Optional[int] = Field(ge=0, le=100, default=None)


class ScenarioHistoryEntry(BaseModel):
    """Summary appended to a profile when a scenario instance completes."""

    scenario_instance_id: str
    scenario_template_id: str
    target_culture_id: str
    completion_date: datetime
    final_success_metric: int = Field(ge=0, le=100)
    total_interactions: int
    key_learnings: List[str] = []
    reward_triggered: Optional[RewardRecord] = None


class UserProfile(BaseModel):
    user_id: str
    username: str
    origin_culture_id: str
    target_culture_interests: List[str] = []
    cultural_competence_score: Dict[str, int] = {}  # culture id → 0-100
    overall_competence: int = Field(ge=0, le=100, default=0)
    learning_path_progress: Dict[str, LearningProgress] = {}
    scenario_history: List[ScenarioHistoryEntry] = []
