# apps/goals/domain/services/streak.py
from typing import Iterable

from apps.goals.domain.dates import days_back, parse_day
from apps.goals.domain.entities import GoalEntity


class StreakCalculator:
    def compute_streak(self, goals: Iterable[GoalEntity], today) -> int:
        """
        Liczy dni pod rząd (wstecz od dzisiaj), w których ukończono choć jeden cel.
        Streak jest globalny dla wszystkich celów, nie per cel.
        """
        goals = list(goals)
        today = parse_day(today)

        # Górne ograniczenie: najdłuższa historia pojedynczego celu.
        # Znane ograniczenie: kilka celów pokrywających różne dni może dać
        # dłuższą serię niż ta granica, wtedy wynik jest zaniżony.
        max_history = max((len(g.completion_dates) for g in goals), default=0)

        completed_days = set()
        for goal in goals:
            completed_days.update(goal.completion_dates)

        streak = 0
        for offset in range(max_history):
            if days_back(today, offset) in completed_days:
                streak += 1
            else:
                break

        return streak


_default_calculator = StreakCalculator()


def compute_streak(goals: Iterable[GoalEntity], today) -> int:
    return _default_calculator.compute_streak(goals, today)
