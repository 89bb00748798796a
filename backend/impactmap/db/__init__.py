"""Storage package: in-memory repository and bundled seed data."""

from impactmap.db.repository import InMemoryRepository
from impactmap.db.seed import SEED_GOALS, SEED_SOLUTIONS, seed_repository

__all__ = [
    "InMemoryRepository",
    "SEED_GOALS",
    "SEED_SOLUTIONS",
    "seed_repository",
]
