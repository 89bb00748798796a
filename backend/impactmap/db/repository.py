"""In-memory goal and solution repository.

Goals are stored as immutable snapshots and replaced wholesale on save, so
readers never observe a half-updated contribution list. Writers that need
read-compute-write atomicity take the goal's lock via goal_lock().
"""

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from impactmap.schemas.goals import ImpactGoal
from impactmap.schemas.solutions import SolutionSchema


class _GoalLock:
    """A goal's lock and the number of threads holding or waiting on it."""

    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


class InMemoryRepository:
    """Holds goals and the solution catalog for one application instance."""

    def __init__(self) -> None:
        self._goals: dict[str, ImpactGoal] = {}
        self._solutions: dict[str, SolutionSchema] = {}
        self._locks: dict[str, _GoalLock] = {}
        self._registry_lock = threading.Lock()

    @contextmanager
    def goal_lock(self, goal_id: str) -> Iterator[None]:
        """Serialize read-compute-write sequences on a single goal.

        The lock entry is dropped once its last user leaves and the goal is
        not stored, so lookups of unknown or deleted ids leave nothing behind.
        """
        with self._registry_lock:
            entry = self._locks.get(goal_id)
            if entry is None:
                entry = self._locks[goal_id] = _GoalLock()
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._registry_lock:
                entry.users -= 1
                if entry.users == 0 and goal_id not in self._goals:
                    del self._locks[goal_id]

    def lock_count(self) -> int:
        with self._registry_lock:
            return len(self._locks)

    def list_goals(self) -> list[ImpactGoal]:
        with self._registry_lock:
            return list(self._goals.values())

    def get_goal(self, goal_id: str) -> ImpactGoal | None:
        with self._registry_lock:
            return self._goals.get(goal_id)

    def save_goal(self, goal: ImpactGoal) -> ImpactGoal:
        with self._registry_lock:
            self._goals[goal.id] = goal
        return goal

    def replace_goal(self, goal: ImpactGoal) -> bool:
        """Store a new snapshot of an existing goal.

        Returns False, storing nothing, when the goal has been deleted.
        """
        with self._registry_lock:
            if goal.id not in self._goals:
                return False
            self._goals[goal.id] = goal
        return True

    def delete_goal(self, goal_id: str) -> bool:
        """Remove a goal. Returns False if it did not exist."""
        with self._registry_lock:
            entry = self._locks.get(goal_id)
            if entry is not None and entry.users == 0:
                del self._locks[goal_id]
            return self._goals.pop(goal_id, None) is not None

    def list_solutions(self) -> list[SolutionSchema]:
        with self._registry_lock:
            return list(self._solutions.values())

    def get_solution(self, solution_id: str) -> SolutionSchema | None:
        with self._registry_lock:
            return self._solutions.get(solution_id)

    def save_solution(self, solution: SolutionSchema) -> SolutionSchema:
        with self._registry_lock:
            self._solutions[solution.id] = solution
        return solution

    def load(
        self,
        goals: Iterable[ImpactGoal] = (),
        solutions: Iterable[SolutionSchema] = (),
    ) -> None:
        """Bulk insert, replacing entries with the same id."""
        for solution in solutions:
            self.save_solution(solution)
        for goal in goals:
            self.save_goal(goal)
