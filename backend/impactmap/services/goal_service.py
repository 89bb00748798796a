"""GoalService: goal lifecycle and progress recalculation.

Orchestrates the repository and the pure progress functions in
impactmap.domain.progress. Progress and contribution percentages are always
derived here; values supplied by callers are ignored.
"""

import uuid
from datetime import datetime, timezone

import structlog

from impactmap.core.exceptions import GoalNotFoundError
from impactmap.db.repository import InMemoryRepository
from impactmap.domain.goals import GoalStatus
from impactmap.domain.progress import GoalProgress, compute_goal_progress
from impactmap.schemas.goals import (
    ContributionProgressResponse,
    GoalCreate,
    GoalProgressResponse,
    GoalUpdate,
    ImpactGoal,
)

logger = structlog.get_logger(__name__)


def apply_progress(goal: ImpactGoal) -> tuple[ImpactGoal, GoalProgress]:
    """Compute a goal's progress and return an updated copy alongside the result.

    The input goal is left untouched. Each contribution's
    contribution_percentage and the goal's progress are replaced with
    freshly computed values.
    """
    result = compute_goal_progress([s.to_domain() for s in goal.solutions])
    solutions = [
        solution.model_copy(update={"contribution_percentage": computed.contribution_percentage})
        for solution, computed in zip(goal.solutions, result.contributions)
    ]
    updated = goal.model_copy(update={"solutions": solutions, "progress": result.progress})
    return updated, result


class GoalService:
    """Service layer for goal CRUD and progress.

    All mutations replace the stored goal under its lock, so concurrent
    recalculations of the same goal are serialized.
    """

    def __init__(self, repository: InMemoryRepository):
        self.repository = repository

    def list_goals(
        self,
        status: GoalStatus | None = None,
        solution_id: str | None = None,
    ) -> list[ImpactGoal]:
        """List goals, optionally filtered by status and contributing solution."""
        goals = self.repository.list_goals()
        if status is not None:
            goals = [g for g in goals if g.status == status]
        if solution_id is not None:
            goals = [g for g in goals if any(s.solution_id == solution_id for s in g.solutions)]
        return goals

    def get_goal(self, goal_id: str) -> ImpactGoal:
        goal = self.repository.get_goal(goal_id)
        if goal is None:
            raise GoalNotFoundError(goal_id)
        return goal

    def create_goal(self, data: GoalCreate) -> ImpactGoal:
        """Create a goal with a fresh id and compute its progress immediately."""
        goal = ImpactGoal.model_validate({
            **data.model_dump(),
            "id": str(uuid.uuid4()),
            "progress": 0.0,
            "last_updated": datetime.now(timezone.utc),
        })

        with self.repository.goal_lock(goal.id):
            goal, _ = apply_progress(goal)
            self.repository.save_goal(goal)

        logger.info(
            "goal_created",
            goal_id=goal.id,
            solution_count=len(goal.solutions),
            progress=goal.progress,
        )
        return goal

    def update_goal(self, goal_id: str, updates: GoalUpdate) -> ImpactGoal:
        """Apply a partial update, refresh last_updated and recompute progress."""
        # Explicit nulls only clear the optional references
        changes = {
            key: value
            for key, value in updates.model_dump(exclude_unset=True).items()
            if value is not None or key in ("parent_goal_id", "contract_id")
        }

        with self.repository.goal_lock(goal_id):
            current = self.get_goal(goal_id)
            goal = ImpactGoal.model_validate({
                **current.model_dump(),
                **changes,
                "last_updated": datetime.now(timezone.utc),
            })
            goal, _ = apply_progress(goal)
            self._replace(goal)

        logger.info(
            "goal_updated",
            goal_id=goal_id,
            fields=sorted(changes),
            progress=goal.progress,
        )
        return goal

    def archive_goal(self, goal_id: str) -> ImpactGoal:
        """Put a goal on hold."""
        with self.repository.goal_lock(goal_id):
            current = self.get_goal(goal_id)
            goal = current.model_copy(update={
                "status": GoalStatus.ON_HOLD,
                "last_updated": datetime.now(timezone.utc),
            })
            self._replace(goal)

        logger.info("goal_archived", goal_id=goal_id, previous_status=current.status.value)
        return goal

    def delete_goal(self, goal_id: str) -> None:
        """Remove a goal together with its solution contributions."""
        with self.repository.goal_lock(goal_id):
            if not self.repository.delete_goal(goal_id):
                raise GoalNotFoundError(goal_id)
        logger.info("goal_deleted", goal_id=goal_id)

    def calculate_progress(self, goal_id: str) -> GoalProgressResponse:
        """Recalculate a goal's progress from its current metrics.

        Safe to call repeatedly: identical stored metrics always yield the
        same progress and contribution percentages. The refreshed values are
        persisted on the stored goal.
        """
        with self.repository.goal_lock(goal_id):
            goal, result = apply_progress(self.get_goal(goal_id))
            self._replace(goal)

        logger.debug("goal_progress_recalculated", goal_id=goal_id, progress=result.progress)

        contributions = []
        for computed in result.contributions:
            solution = self.repository.get_solution(computed.solution_id)
            contributions.append(
                ContributionProgressResponse(
                    solution_id=computed.solution_id,
                    solution_name=solution.name if solution else None,
                    contribution_weight=computed.contribution_weight,
                    metric_progress=computed.metric_progress,
                    contribution_percentage=computed.contribution_percentage,
                )
            )

        return GoalProgressResponse(
            goal_id=goal_id,
            progress=result.progress,
            contributions=contributions,
        )

    def recalculate_all(self) -> int:
        """Recalculate every stored goal. Returns the number of goals refreshed."""
        count = 0
        for goal in self.repository.list_goals():
            with self.repository.goal_lock(goal.id):
                current = self.repository.get_goal(goal.id)
                if current is None:
                    continue
                updated, _ = apply_progress(current)
                if not self.repository.replace_goal(updated):
                    continue
            count += 1

        logger.info("goals_recalculated", count=count)
        return count

    def _replace(self, goal: ImpactGoal) -> None:
        """Persist a recomputed snapshot; fails if the goal was deleted meanwhile."""
        if not self.repository.replace_goal(goal):
            raise GoalNotFoundError(goal.id)
