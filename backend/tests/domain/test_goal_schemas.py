"""Tests for goal request/response schemas and their domain conversion."""
import pytest
from pydantic import ValidationError

from impactmap.domain.goals import Contribution, GoalStatus, Metric, MetricDirection
from impactmap.schemas.goals import (
    GoalCreate,
    GoalUpdate,
    MetricSchema,
    SolutionContributionSchema,
)

pytestmark = pytest.mark.unit


class TestMetricSchema:
    def test_camel_case_aliases(self):
        metric = MetricSchema.model_validate(
            {"current": 1, "target": 2, "direction": "decrease", "updatedAt": "2024-03-15T00:00:00Z"}
        )
        assert metric.direction is MetricDirection.DECREASE
        assert metric.updated_at.year == 2024

    def test_direction_defaults_to_increase(self):
        assert MetricSchema(current=1, target=2).direction is MetricDirection.INCREASE

    def test_unknown_direction_rejected(self):
        with pytest.raises(ValidationError):
            MetricSchema(current=1, target=2, direction="sideways")

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_values_rejected(self, value):
        """NaN and infinities never reach the progress computation."""
        with pytest.raises(ValidationError):
            MetricSchema(current=value, target=100)
        with pytest.raises(ValidationError):
            MetricSchema(current=1, target=value)

    def test_to_domain(self):
        metric = MetricSchema(current=3, target=4, direction="decrease", unit="ms")
        assert metric.to_domain() == Metric(3, 4, MetricDirection.DECREASE, "ms")


class TestSolutionContributionSchema:
    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError):
            SolutionContributionSchema(solution_id="1", contribution_weight=-0.1)

    def test_echoed_contribution_percentage_accepted(self):
        """Stale or out-of-range values are accepted on input; they are recomputed."""
        schema = SolutionContributionSchema(solution_id="1", contribution_weight=1, contribution_percentage=85)
        assert schema.contribution_percentage == 85

    def test_serializes_with_camel_case(self):
        data = SolutionContributionSchema(solution_id="1", contribution_weight=0.5).model_dump(by_alias=True)
        assert set(data) == {"solutionId", "contributionWeight", "contributionPercentage", "metrics"}

    def test_to_domain(self):
        schema = SolutionContributionSchema.model_validate({
            "solutionId": "2",
            "contributionWeight": 0.7,
            "metrics": {"share": {"current": 15, "target": 25}},
        })
        assert schema.to_domain() == Contribution(
            solution_id="2",
            contribution_weight=0.7,
            metrics={"share": Metric(15, 25, MetricDirection.INCREASE, "")},
        )


class TestGoalCreate:
    def test_defaults(self):
        goal = GoalCreate(title="T", description="D", deadline="2025-01-01", weight=1)
        assert goal.status is GoalStatus.DRAFT
        assert goal.solutions == []
        assert goal.team_members == []

    def test_supplied_progress_is_ignored(self):
        goal = GoalCreate.model_validate(
            {"title": "T", "description": "D", "deadline": "2025-01-01", "weight": 1, "progress": 0.9}
        )
        assert "progress" not in goal.model_dump()

    def test_title_required(self):
        with pytest.raises(ValidationError):
            GoalCreate(description="D", deadline="2025-01-01", weight=1)

    def test_on_hold_status_value(self):
        goal = GoalCreate(title="T", description="D", deadline="2025-01-01", weight=1, status="on-hold")
        assert goal.status is GoalStatus.ON_HOLD


class TestGoalUpdate:
    def test_only_set_fields_are_dumped(self):
        update = GoalUpdate.model_validate({"title": "New"})
        assert update.model_dump(exclude_unset=True) == {"title": "New"}
