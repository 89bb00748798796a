"""Goal API endpoints.

GET    /api/goals                - List goals (filter by status, solution_id)
POST   /api/goals                - Create goal, progress computed immediately
GET    /api/goals/{id}           - Get goal
PATCH  /api/goals/{id}           - Partial update, progress recomputed
POST   /api/goals/{id}/archive   - Put goal on hold
DELETE /api/goals/{id}           - Delete goal
GET    /api/goals/{id}/progress  - Recalculate and return progress breakdown
"""

from fastapi import APIRouter, Depends, HTTPException, Response

from impactmap.api.deps import get_goal_service
from impactmap.core.exceptions import GoalNotFoundError
from impactmap.domain.goals import GoalStatus
from impactmap.schemas.goals import GoalCreate, GoalProgressResponse, GoalUpdate, ImpactGoal
from impactmap.services.goal_service import GoalService

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail="Goal not found")


@router.get("", response_model=list[ImpactGoal])
async def list_goals(
    status: GoalStatus | None = None,
    solution_id: str | None = None,
    service: GoalService = Depends(get_goal_service),
) -> list[ImpactGoal]:
    return service.list_goals(status=status, solution_id=solution_id)


@router.post("", response_model=ImpactGoal, status_code=201)
async def create_goal(
    data: GoalCreate,
    service: GoalService = Depends(get_goal_service),
) -> ImpactGoal:
    """Create a goal.

    Status defaults to draft. Progress and contribution percentages are
    computed from the supplied metrics; any values sent for them are ignored.
    """
    return service.create_goal(data)


@router.get("/{goal_id}", response_model=ImpactGoal)
async def get_goal(
    goal_id: str,
    service: GoalService = Depends(get_goal_service),
) -> ImpactGoal:
    try:
        return service.get_goal(goal_id)
    except GoalNotFoundError:
        raise _not_found()


@router.patch("/{goal_id}", response_model=ImpactGoal)
async def update_goal(
    goal_id: str,
    updates: GoalUpdate,
    service: GoalService = Depends(get_goal_service),
) -> ImpactGoal:
    try:
        return service.update_goal(goal_id, updates)
    except GoalNotFoundError:
        raise _not_found()


@router.post("/{goal_id}/archive", response_model=ImpactGoal)
async def archive_goal(
    goal_id: str,
    service: GoalService = Depends(get_goal_service),
) -> ImpactGoal:
    try:
        return service.archive_goal(goal_id)
    except GoalNotFoundError:
        raise _not_found()


@router.delete("/{goal_id}", status_code=204)
async def delete_goal(
    goal_id: str,
    service: GoalService = Depends(get_goal_service),
) -> Response:
    try:
        service.delete_goal(goal_id)
    except GoalNotFoundError:
        raise _not_found()
    return Response(status_code=204)


@router.get("/{goal_id}/progress", response_model=GoalProgressResponse)
async def get_goal_progress(
    goal_id: str,
    service: GoalService = Depends(get_goal_service),
) -> GoalProgressResponse:
    """Recalculate a goal's progress from its current metrics.

    Returns goal-level progress (0-1) and, per contributing solution, the
    mean metric progress (0-100) and contribution percentage (0-1).
    """
    try:
        return service.calculate_progress(goal_id)
    except GoalNotFoundError:
        raise _not_found()
