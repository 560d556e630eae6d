"""
Session State Stores — active scenario instances and user profiles.

Updated by: the simulation service after each processed interaction
Queried by: the simulation service and the API
"""

import threading
from collections import defaultdict
from typing import Dict, List, Optional

from cultural_advisor.errors import PreconditionViolation
from cultural_advisor.models.feedback import InteractionFeedback
from cultural_advisor.models.scenario import ActiveScenarioInstance
from cultural_advisor.models.user import ScenarioHistoryEntry, UserProfile


class ScenarioStore:
    """
    In-memory scenario instance store.
    Instances are replaced whole on update; callers hold lock(instance_id)
    across read-evaluate-update so one instance never sees interleaved turns.
    """

    def __init__(self):
        self._instances: Dict[str, ActiveScenarioInstance] = {}
        self._transcripts: Dict[str, List[InteractionFeedback]] = defaultdict(list)
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def create(self, instance: ActiveScenarioInstance) -> ActiveScenarioInstance:
        """Register a new scenario instance."""
        if instance.instance_id in self._instances:
            raise ValueError(f"Scenario instance {instance.instance_id} already exists")
        self._instances[instance.instance_id] = instance
        return instance

    def get(self, instance_id: str) -> Optional[ActiveScenarioInstance]:
        """Get a scenario instance by ID."""
        return self._instances.get(instance_id)

    def require(self, instance_id: str) -> ActiveScenarioInstance:
        instance = self._instances.get(instance_id)
        if instance is None:
            raise PreconditionViolation("scenario", instance_id)
        return instance

    def update(self, instance: ActiveScenarioInstance) -> None:
        """Replace a stored instance with its next state."""
        if instance.instance_id not in self._instances:
            raise PreconditionViolation("scenario", instance.instance_id)
        self._instances[instance.instance_id] = instance

    def list_for_user(self, user_id: str) -> List[ActiveScenarioInstance]:
        """All instances started by a user."""
        return [i for i in self._instances.values() if i.user_id == user_id]

    def lock(self, instance_id: str) -> threading.Lock:
        """The lock serialising interactions on one instance."""
        with self._locks_guard:
            if instance_id not in self._locks:
                self._locks[instance_id] = threading.Lock()
            return self._locks[instance_id]

    def append_feedback(self, instance_id: str, feedback: InteractionFeedback) -> None:
        """Record a feedback packet in the instance's transcript."""
        self._transcripts[instance_id].append(feedback)

    def get_transcript(self, instance_id: str) -> List[InteractionFeedback]:
        """Feedback packets for an instance, oldest first."""
        return list(self._transcripts.get(instance_id, []))


class UserProfileStore:
    """In-memory user profile store."""

    def __init__(self, profiles: Optional[List[UserProfile]] = None):
        self._profiles: Dict[str, UserProfile] = {}
        for profile in profiles or []:
            self.upsert(profile)

    def upsert(self, profile: UserProfile) -> None:
        """Insert or replace a profile."""
        self._profiles[profile.user_id] = profile

    def get(self, user_id: str) -> Optional[UserProfile]:
        return self._profiles.get(user_id)

    def require(self, user_id: str) -> UserProfile:
        profile = self._profiles.get(user_id)
        if profile is None:
            raise PreconditionViolation("user profile", user_id)
        return profile

    def list_profiles(self) -> List[UserProfile]:
        return list(self._profiles.values())

    def append_history(self, user_id: str, entry: ScenarioHistoryEntry) -> UserProfile:
        """Append a completed scenario summary to a user's history."""
        profile = self.require(user_id)
        profile.scenario_history.append(entry)
        return profile
