"""Shared FastAPI dependencies."""

from fastapi import Depends, Request

from impactmap.db.repository import InMemoryRepository
from impactmap.services.goal_service import GoalService


def get_repository(request: Request) -> InMemoryRepository:
    """Dependency that provides the application's repository.

    Override this dependency in tests via app.dependency_overrides.
    """
    return request.app.state.repository


def get_goal_service(repository: InMemoryRepository = Depends(get_repository)) -> GoalService:
    return GoalService(repository)
