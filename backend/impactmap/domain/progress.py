"""Deterministic goal progress computation.

Pure functions with no external dependencies. Three stages:

- normalize_metric: one metric -> percentage in [0, 100]
- aggregate_contribution: unweighted mean of a contribution's metrics
- compute_goal_progress: contribution-weighted mean -> progress in [0, 1]

Every division by zero is resolved to a finite value and every stage is
clamped, so callers never see NaN, infinities or negative percentages.
"""
from collections.abc import Iterable
from dataclasses import dataclass

from impactmap.domain.goals import Contribution, MetricDirection


@dataclass(frozen=True)
class ContributionProgress:
    """Computed progress for one contribution."""

    solution_id: str
    contribution_weight: float
    metric_progress: float  # 0-100
    contribution_percentage: float  # 0-1


@dataclass(frozen=True)
class GoalProgress:
    """Computed progress for a goal, with one entry per contribution in input order."""

    progress: float  # 0-1
    contributions: tuple[ContributionProgress, ...] = ()


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def normalize_metric(
    current: float,
    target: float,
    direction: MetricDirection | str = MetricDirection.INCREASE,
) -> float:
    """Convert one metric sample into a progress percentage (0-100).

    Args:
        current: Observed value
        target: Desired value
        direction: "increase" if higher is better, "decrease" if lower is better

    Returns:
        Percentage clamped to [0, 100]

    Any direction other than "decrease" is treated as "increase".

    Degenerate cases:
        - increase with target == 0: 100 when current >= 0, otherwise 0
        - decrease with current <= target (zero range): 100, already met
    """
    if direction == MetricDirection.DECREASE:
        gap = max(current, target) - target
        if gap <= 0:
            return 100.0
        improvement = _clamp(current - target, 0, gap)
        ratio = 1 - (improvement / gap)
        return _clamp(ratio * 100, 0.0, 100.0)

    if target == 0:
        return 100.0 if current >= 0 else 0.0
    return _clamp((current / target) * 100, 0.0, 100.0)


def aggregate_contribution(contribution: Contribution) -> ContributionProgress:
    """Average a contribution's normalized metrics into one percentage.

    Every metric counts equally regardless of name, unit or direction.
    A contribution with no metrics has 0 progress.
    """
    metrics = list(contribution.metrics.values())
    if metrics:
        total = sum(normalize_metric(m.current, m.target, m.direction) for m in metrics)
        metric_progress = _clamp(total / len(metrics), 0.0, 100.0)
    else:
        metric_progress = 0.0

    return ContributionProgress(
        solution_id=contribution.solution_id,
        contribution_weight=contribution.contribution_weight,
        metric_progress=metric_progress,
        contribution_percentage=metric_progress / 100,
    )


def compute_goal_progress(solutions: Iterable[Contribution] | None) -> GoalProgress:
    """Compute goal progress (0-1) from its contributing solutions.

    Weighted average of per-contribution progress, where each contribution's
    weight is its contribution_weight. Contributions without metrics still
    count toward the total weight, so they dilute the result.

    Pure function -- inputs are not mutated. Returns progress 0 when there
    are no contributions or when the weights sum to zero or less.
    """
    if not solutions:
        return GoalProgress(progress=0.0)

    contributions = tuple(aggregate_contribution(c) for c in solutions)
    if not contributions:
        return GoalProgress(progress=0.0)

    # Weights are relative; scaling by the largest keeps huge finite weights from overflowing
    scale = max(abs(c.contribution_weight) for c in contributions)
    if scale == 0:
        return GoalProgress(progress=0.0, contributions=contributions)

    total_weight = sum(c.contribution_weight / scale for c in contributions)
    if total_weight <= 0:
        return GoalProgress(progress=0.0, contributions=contributions)

    weighted_progress = sum(
        c.contribution_percentage * (c.contribution_weight / scale) for c in contributions
    )

    return GoalProgress(
        progress=_clamp(weighted_progress / total_weight, 0.0, 1.0),
        contributions=contributions,
    )
