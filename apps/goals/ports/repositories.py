# apps/goals/ports/repositories.py
from abc import ABC, abstractmethod
from typing import Iterable, List
from apps.goals.domain.entities import GoalEntity


class IGoalRepository(ABC):
    @abstractmethod
    def load_all(self) -> List[GoalEntity]:
        """Zwraca wszystkie cele w kolejności, w jakiej zostały zapisane."""
        pass

    @abstractmethod
    def save_all(self, goals: Iterable[GoalEntity]) -> None:
        """Zastępuje cały zapisany stan podaną listą celów."""
        pass
