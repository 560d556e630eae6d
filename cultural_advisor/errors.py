"""Errors raised across the Cultural Advisor kernel."""

from typing import Optional


class PreconditionViolation(LookupError):
    """
    A required culture, template, profile, scenario or setting is missing.

    Raised before any evaluation happens, so no partial state is written.
    """

    def __init__(self, resource: str, key: Optional[str] = None, detail: Optional[str] = None):
        self.resource = resource
        self.key = key
        if detail is None:
            if key is None:
                detail = f"{resource} is required"
            else:
                detail = f"{resource} '{key}' not found"
        self.detail = detail
        super().__init__(detail)


class ScenarioCompletedError(PreconditionViolation):
    """An interaction was submitted to a scenario whose turn budget is spent."""

    def __init__(self, instance_id: str):
        super().__init__(
            "scenario",
            instance_id,
            detail=f"scenario '{instance_id}' is already completed",
        )
