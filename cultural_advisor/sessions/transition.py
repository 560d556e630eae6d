"""Scenario state transition applied after each evaluated interaction."""

from cultural_advisor.models.feedback import InteractionFeedback
from cultural_advisor.models.scenario import ActiveScenarioInstance, ScenarioTemplate


def clamp_metric(value: int) -> int:
    return max(0, min(100, value))


def advance_scenario(
    scenario: ActiveScenarioInstance,
    feedback: InteractionFeedback,
    template: ScenarioTemplate,
) -> ActiveScenarioInstance:
    """
    Return the scenario's next state. The input instance is left untouched,
    so the store can swap the whole instance in a single update.

    Any positive impact completes the first open objective in template order,
    whichever objective the utterance actually served.
    """
    updated = scenario.model_copy(deep=True)
    impact = feedback.overall_cultural_competence_impact

    updated.current_turn += 1
    updated.current_situation = feedback.ai_response
    updated.success_metric = clamp_metric(updated.success_metric + impact)

    if impact > 0:
        for objective in template.objectives:
            if not updated.objective_status.get(objective, False):
                updated.objective_status[objective] = True
                break

    if updated.current_turn >= updated.max_turns:
        updated.is_completed = True

    return updated
