"""Tests for the scenario state transition."""

from datetime import datetime

from cultural_advisor.knowledge.base import KnowledgeBase
from cultural_advisor.models.culture import FeedbackSeverity
from cultural_advisor.models.feedback import FeedbackSummary, InteractionFeedback
from cultural_advisor.models.scenario import ActiveScenarioInstance
from cultural_advisor.models.user import UserProfile
from cultural_advisor.sessions.transition import advance_scenario, clamp_metric


KB = KnowledgeBase.default()
TEMPLATE = KB.require_template("SCEN001")


def _make_scenario(success_metric: int = 50, current_turn: int = 0, max_turns: int = 10) -> ActiveScenarioInstance:
    return ActiveScenarioInstance(
        instance_id="scenario_test",
        scenario_template_id=TEMPLATE.id,
        user_id="u1",
        target_culture=KB.require_culture("GERMANY"),
        current_situation=TEMPLATE.initial_situation,
        objective_status={o: False for o in TEMPLATE.objectives},
        current_turn=current_turn,
        max_turns=max_turns,
        success_metric=success_metric,
        started_at=datetime.utcnow(),
    )


def _make_feedback(impact: int, response: str = "The meeting continues.") -> InteractionFeedback:
    return InteractionFeedback(
        user_action="test",
        ai_response=response,
        feedback_summary=FeedbackSummary(text="test", severity=FeedbackSeverity.NEUTRAL),
        timestamp=datetime.utcnow(),
        scenario_id="scenario_test",
        target_culture_id="GERMANY",
        user_profile_snapshot=UserProfile(user_id="u1", username="U", origin_culture_id="USA"),
        detailed_feedback=[],
        overall_cultural_competence_impact=impact,
    )


class TestClampMetric:
    def test_clamp(self):
        assert clamp_metric(-20) == 0
        assert clamp_metric(115) == 100
        assert clamp_metric(42) == 42


class TestAdvanceScenario:
    def test_turn_and_situation_advance(self):
        scenario = _make_scenario()
        updated = advance_scenario(scenario, _make_feedback(0, "Mr. Schmidt nods."), TEMPLATE)
        assert updated.current_turn == 1
        assert updated.current_situation == "Mr. Schmidt nods."
        assert updated.success_metric == 50
        assert not updated.is_completed

    def test_input_left_untouched(self):
        scenario = _make_scenario()
        advance_scenario(scenario, _make_feedback(15), TEMPLATE)
        assert scenario.current_turn == 0
        assert scenario.success_metric == 50
        assert not any(scenario.objective_status.values())

    def test_metric_clamped_at_zero(self):
        updated = advance_scenario(_make_scenario(success_metric=0), _make_feedback(-25), TEMPLATE)
        assert updated.success_metric == 0

    def test_metric_clamped_at_hundred(self):
        updated = advance_scenario(_make_scenario(success_metric=100), _make_feedback(15), TEMPLATE)
        assert updated.success_metric == 100

    def test_positive_impact_marks_first_open_objective(self):
        updated = advance_scenario(_make_scenario(), _make_feedback(10), TEMPLATE)
        assert updated.objective_status[TEMPLATE.objectives[0]] is True
        assert sum(updated.objective_status.values()) == 1

        updated = advance_scenario(updated, _make_feedback(15), TEMPLATE)
        assert updated.objective_status[TEMPLATE.objectives[1]] is True
        assert sum(updated.objective_status.values()) == 2

    def test_non_positive_impact_never_unmarks(self):
        updated = advance_scenario(_make_scenario(), _make_feedback(10), TEMPLATE)
        for impact in (0, -5, -25):
            updated = advance_scenario(updated, _make_feedback(impact), TEMPLATE)
            assert updated.objective_status[TEMPLATE.objectives[0]] is True
            assert sum(updated.objective_status.values()) == 1

    def test_all_objectives_done_stays_done(self):
        scenario = _make_scenario()
        for _ in range(len(TEMPLATE.objectives) + 2):
            scenario = advance_scenario(scenario, _make_feedback(15), TEMPLATE)
        assert all(scenario.objective_status.values())

    def test_last_turn_completes(self):
        updated = advance_scenario(_make_scenario(current_turn=9), _make_feedback(0), TEMPLATE)
        assert updated.current_turn == 10
        assert updated.is_completed
