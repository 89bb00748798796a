"""Pydantic schema for the dashboard summary."""

from pydantic import Field

from impactmap.schemas.goals import CamelModel


class DashboardResponse(CamelModel):
    """Counts and averages shown on the dashboard stats grid.

    All count fields default to 0 and goals_by_status to an empty dict (never null).
    """

    total_goals: int = Field(0, ge=0)
    active_goals: int = Field(0, ge=0, description="Goals with status live")
    goals_by_status: dict[str, int] = Field(default_factory=dict)
    total_solutions: int = Field(0, ge=0)
    average_progress: float = Field(0.0, ge=0, le=1, description="Mean progress over all goals")
