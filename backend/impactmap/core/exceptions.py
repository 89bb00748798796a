class ImpactMapError(Exception):
    """Base exception for ImpactMap application."""

    pass


class GoalNotFoundError(ImpactMapError):
    """Raised when a goal id does not resolve to a stored goal."""

    def __init__(self, goal_id: str):
        self.goal_id = goal_id
        super().__init__(f"Goal '{goal_id}' not found")
