"""Pydantic schemas for goals, solution contributions and metrics.

JSON uses camelCase field names (solutionId, contributionWeight, ...);
Python attributes are snake_case. Both spellings are accepted on input.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from impactmap.domain.goals import Contribution, GoalStatus, Metric, MetricDirection


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )


class MetricSchema(CamelModel):
    """A measured quantity attached to one solution's contribution."""

    current: float = Field(..., description="Observed value")
    target: float = Field(..., description="Desired value")
    direction: MetricDirection = Field(
        MetricDirection.INCREASE, description="increase if higher is better, decrease if lower is better"
    )
    unit: str = Field("", description="Display unit (not used in progress computation)")
    updated_at: datetime | None = None
    data_source: str | None = None

    def to_domain(self) -> Metric:
        return Metric(
            current=self.current,
            target=self.target,
            direction=self.direction,
            unit=self.unit,
        )


class SolutionContributionSchema(CamelModel):
    """Weighted link between a goal and a solution.

    contribution_percentage is derived: it is overwritten on every progress
    recalculation and never read as input.
    """

    solution_id: str = Field(..., description="Referenced solution id")
    contribution_weight: float = Field(..., ge=0, description="Relative weight in the goal progress")
    contribution_percentage: float = Field(
        0.0, description="Last computed progress (0-1); any value sent by clients is replaced"
    )
    metrics: dict[str, MetricSchema] = Field(default_factory=dict)

    def to_domain(self) -> Contribution:
        return Contribution(
            solution_id=self.solution_id,
            contribution_weight=self.contribution_weight,
            metrics={name: metric.to_domain() for name, metric in self.metrics.items()},
        )


class GoalDependencySchema(CamelModel):
    goal_id: str
    relationship_type: str
    impact_weight: float


class GoalBase(CamelModel):
    title: str = Field(..., min_length=1)
    description: str
    deadline: date
    weight: float = Field(..., ge=0, description="Goal weight relative to sibling goals")
    status: GoalStatus = GoalStatus.DRAFT
    team_members: list[str] = Field(default_factory=list)
    parent_goal_id: str | None = None
    solutions: list[SolutionContributionSchema] = Field(default_factory=list)
    dependencies: list[GoalDependencySchema] = Field(default_factory=list)
    contract_id: str | None = None


class GoalCreate(GoalBase):
    """Request body for goal creation. Any supplied progress is ignored."""


class GoalUpdate(CamelModel):
    """Partial update. Only fields present in the request are applied."""

    title: str | None = Field(None, min_length=1)
    description: str | None = None
    deadline: date | None = None
    weight: float | None = Field(None, ge=0)
    status: GoalStatus | None = None
    team_members: list[str] | None = None
    parent_goal_id: str | None = None
    solutions: list[SolutionContributionSchema] | None = None
    dependencies: list[GoalDependencySchema] | None = None
    contract_id: str | None = None


class ImpactGoal(GoalBase):
    """Stored goal. progress is the computed, contribution-weighted completion (0-1)."""

    id: str
    progress: float = Field(0.0, ge=0, le=1)
    last_updated: datetime | None = None


class ContributionProgressResponse(CamelModel):
    solution_id: str
    solution_name: str | None = Field(None, description="Catalog name of the solution, if known")
    contribution_weight: float
    metric_progress: float = Field(..., ge=0, le=100, description="Mean metric progress (0-100)")
    contribution_percentage: float = Field(..., ge=0, le=1)


class GoalProgressResponse(CamelModel):
    goal_id: str
    progress: float = Field(..., ge=0, le=1)
    contributions: list[ContributionProgressResponse] = Field(default_factory=list)
