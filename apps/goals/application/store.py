# apps/goals/application/store.py
import itertools
import logging
import threading
from datetime import date
from typing import Callable, Dict, Iterator, List, Optional

from apps.goals.domain.dates import DEFAULT_DAY, parse_day
from apps.goals.domain.entities import (
    DEFAULT_END_TIME,
    DEFAULT_START_TIME,
    GoalEntity,
    GoalFrequency,
)
from apps.goals.domain.exceptions import InvalidInput
from apps.goals.domain.services.completion import CompletionRecorder
from apps.goals.domain.services.reports import (
    ProgressSummary,
    ReviewReport,
    compute_progress,
    compute_rates_by_frequency,
    compute_review,
)
from apps.goals.domain.services.streak import compute_streak
from apps.goals.ports.repositories import IGoalRepository

logger = logging.getLogger(__name__)


def local_today() -> date:
    """Dzisiejsza data wg TIME_ZONE z ustawień Django (lub zegara systemowego)."""
    from django.conf import settings
    from django.core.exceptions import ImproperlyConfigured

    # Odczyt ustawienia ładuje DJANGO_SETTINGS_MODULE (settings są leniwe)
    try:
        use_tz = settings.USE_TZ
    except ImproperlyConfigured:
        return date.today()
    if not use_tz:
        return date.today()

    from django.utils import timezone
    return timezone.localdate()


class GoalStore:
    """
    Jedyny właściciel celów w sesji.

    Na zewnątrz wychodzą wyłącznie kopie (snapshoty); zmiany tylko przez
    metody sklepu. Mutacje i odczyty są serializowane jednym zamkiem.
    """

    def __init__(self, clock: Callable[[], date] = local_today,
                 recorder: Optional[CompletionRecorder] = None):
        self._goals: List[GoalEntity] = []
        self._ids = itertools.count(1)
        self._lock = threading.RLock()
        self.clock = clock
        self.recorder = recorder or CompletionRecorder()

    # --- Persystencja (opcjonalna) ---

    @classmethod
    def load(cls, repository: IGoalRepository, **kwargs) -> 'GoalStore':
        store = cls(**kwargs)
        goals = repository.load_all()
        with store._lock:
            for goal in goals:
                store._goals.append(goal.copy())
            # Nowe ID zawsze większe od wczytanych
            last_id = max((g.id for g in goals if g.id is not None), default=0)
            store._ids = itertools.count(last_id + 1)
            for goal in store._goals:
                if goal.id is None:
                    goal.id = next(store._ids)
        logger.info("Loaded %d goals from %s", len(goals), type(repository).__name__)
        return store

    def save(self, repository: IGoalRepository) -> None:
        snapshot = self.goals()
        repository.save_all(snapshot)
        logger.info("Saved %d goals to %s", len(snapshot), type(repository).__name__)

    # --- Odczyt ---

    def goals(self) -> List[GoalEntity]:
        with self._lock:
            return [g.copy() for g in self._goals]

    def get(self, goal) -> Optional[GoalEntity]:
        with self._lock:
            found = self._find(goal)
            return found.copy() if found else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._goals)

    def __iter__(self) -> Iterator[GoalEntity]:
        return iter(self.goals())

    def __contains__(self, goal) -> bool:
        with self._lock:
            return self._find(goal) is not None

    # --- Mutacje ---

    def add(self, name: str, frequency, start_date=None, end_date=None,
            start_time: Optional[str] = None, end_time: Optional[str] = None) -> GoalEntity:
        if not isinstance(name, str) or not name.strip():
            raise InvalidInput("Goal name cannot be empty")

        # Walidacja przed zmianą stanu
        frequency = GoalFrequency.coerce(frequency)
        start = parse_day(start_date) if start_date is not None else DEFAULT_DAY
        end = parse_day(end_date) if end_date is not None else DEFAULT_DAY

        with self._lock:
            goal = GoalEntity(
                id=next(self._ids),
                name=name,
                frequency=frequency,
                start_date=start,
                end_date=end,
                start_time=start_time or DEFAULT_START_TIME,
                end_time=end_time or DEFAULT_END_TIME,
            )
            self._goals.append(goal)
            logger.info("Added goal #%s %r (%s)", goal.id, goal.name, goal.frequency.name)
            return goal.copy()

    def remove(self, goal) -> None:
        with self._lock:
            found = self._find(goal)
            if found is None:
                logger.debug("Remove skipped, goal %r not in store", goal)
                return
            self._goals.remove(found)
            logger.info("Removed goal #%s %r", found.id, found.name)

    def set_frequency(self, goal, frequency) -> None:
        frequency = GoalFrequency.coerce(frequency)
        with self._lock:
            found = self._find(goal)
            if found is None:
                logger.debug("Frequency change skipped, goal %r not in store", goal)
                return
            found.frequency = frequency
            logger.info("Goal #%s frequency -> %s", found.id, frequency.name)

    def set_completed(self, goal, completed: bool, today=None) -> None:
        with self._lock:
            found = self._find(goal)
            if found is None:
                logger.debug("Completion toggle skipped, goal %r not in store", goal)
                return

            # Przejście False -> True zapisuje dzisiejsze ukończenie
            if completed and not found.completed:
                self.recorder.record_completion(found, self._resolve_today(today))

            found.completed = bool(completed)
            logger.info("Goal #%s completed=%s", found.id, found.completed)

    def record_completion(self, goal, today=None) -> bool:
        with self._lock:
            found = self._find(goal)
            if found is None:
                return False
            return self.recorder.record_completion(found, self._resolve_today(today))

    # --- Raporty (przeliczane przy każdym odczycie) ---

    def streak(self, today=None) -> int:
        return compute_streak(self.goals(), self._resolve_today(today))

    def rates_by_frequency(self) -> Dict[str, float]:
        return compute_rates_by_frequency(self.goals())

    def progress(self) -> ProgressSummary:
        return compute_progress(self.goals())

    def review(self, today=None) -> ReviewReport:
        return compute_review(self.goals(), self._resolve_today(today))

    # --- Pomocnicze ---

    def _resolve_today(self, today) -> date:
        return parse_day(today if today is not None else self.clock())

    def _find(self, goal) -> Optional[GoalEntity]:
        """Szuka po tożsamości (ID), nie po nazwie; nazwy mogą się powtarzać."""
        goal_id = goal.id if isinstance(goal, GoalEntity) else goal
        if goal_id is None or isinstance(goal_id, bool):
            return None
        for candidate in self._goals:
            if candidate.id == goal_id:
                return candidate
        return None
