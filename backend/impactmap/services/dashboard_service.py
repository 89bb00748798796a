"""DashboardService: goal and solution counts for the dashboard stats grid."""

from collections import Counter

from impactmap.db.repository import InMemoryRepository
from impactmap.domain.goals import GoalStatus
from impactmap.schemas.dashboard import DashboardResponse


class DashboardService:
    """Pure orchestration over the repository; goal progress is read as stored."""

    def __init__(self, repository: InMemoryRepository):
        self.repository = repository

    def get_dashboard(self) -> DashboardResponse:
        goals = self.repository.list_goals()
        solutions = self.repository.list_solutions()

        status_counts = Counter(goal.status for goal in goals)
        goals_by_status = {status.value: status_counts.get(status, 0) for status in GoalStatus}

        average_progress = 0.0
        if goals:
            average_progress = sum(goal.progress for goal in goals) / len(goals)

        return DashboardResponse(
            total_goals=len(goals),
            active_goals=goals_by_status[GoalStatus.LIVE.value],
            goals_by_status=goals_by_status,
            total_solutions=len(solutions),
            average_progress=min(average_progress, 1.0),
        )
