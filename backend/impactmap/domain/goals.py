"""Goal, contribution and metric value types.

Pure domain types with no external dependencies.
"""
from dataclasses import dataclass, field
from enum import Enum


class MetricDirection(str, Enum):
    """Which way a metric has to move to approach its target."""

    INCREASE = "increase"
    DECREASE = "decrease"


class GoalStatus(str, Enum):
    """Goal lifecycle status. Archiving moves a goal to ON_HOLD."""

    DRAFT = "draft"
    LIVE = "live"
    COMPLETED = "completed"
    TERMINATED = "terminated"
    ON_HOLD = "on-hold"


@dataclass(frozen=True)
class Metric:
    """One measured quantity of a solution's contribution to a goal."""

    current: float
    target: float
    direction: MetricDirection = MetricDirection.INCREASE
    unit: str = ""


@dataclass(frozen=True)
class Contribution:
    """Weighted link between a goal and a solution, with its own metric set."""

    solution_id: str
    contribution_weight: float
    metrics: dict[str, Metric] = field(default_factory=dict)
