"""Shared test fixtures for all test groups."""

import pytest
from fastapi.testclient import TestClient

from impactmap.db.repository import InMemoryRepository
from impactmap.db.seed import seed_repository
from impactmap.services.goal_service import GoalService


@pytest.fixture
def repository():
    """Fresh, empty repository."""
    return InMemoryRepository()


@pytest.fixture
def seeded_repository():
    """Repository loaded with seed data and recalculated progress."""
    repo = InMemoryRepository()
    seed_repository(repo)
    GoalService(repo).recalculate_all()
    return repo


@pytest.fixture
def goal_service(seeded_repository):
    return GoalService(seeded_repository)


@pytest.fixture
def api_client(seeded_repository):
    """TestClient over an app serving the seeded repository.

    The lifespan is not entered, so startup seeding does not run twice.
    """
    from impactmap.main import create_app

    return TestClient(create_app(repository=seeded_repository))


@pytest.fixture
def make_contribution():
    """Build a camelCase contribution payload.

    Metrics are given as keyword (current, target[, direction]) tuples.
    """

    def _make(solution_id="1", weight=1.0, **metrics):
        payload = {}
        for name, values in metrics.items():
            current, target, *rest = values
            payload[name] = {
                "current": current,
                "target": target,
                "direction": rest[0] if rest else "increase",
                "unit": "percent",
            }
        return {
            "solutionId": solution_id,
            "contributionWeight": weight,
            "metrics": payload,
        }

    return _make


@pytest.fixture
def make_goal_payload():
    def _make(title="Reduce onboarding time", solutions=None, **extra):
        return {
            "title": title,
            "description": "Test goal",
            "deadline": "2025-06-30",
            "weight": 1.0,
            "solutions": solutions or [],
            **extra,
        }

    return _make
