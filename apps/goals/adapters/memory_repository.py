# apps/goals/adapters/memory_repository.py
from typing import Iterable, List
from apps.goals.domain.entities import GoalEntity
from apps.goals.ports.repositories import IGoalRepository


class InMemoryGoalRepository(IGoalRepository):
    """Repozytorium w pamięci procesu (domyślne dla sesji bez bazy)."""

    def __init__(self, goals: Iterable[GoalEntity] = ()):
        self._goals = [g.copy() for g in goals]

    def load_all(self) -> List[GoalEntity]:
        return [g.copy() for g in self._goals]

    def save_all(self, goals: Iterable[GoalEntity]) -> None:
        self._goals = [g.copy() for g in goals]
