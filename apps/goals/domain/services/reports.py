# apps/goals/domain/services/reports.py
from typing import Dict, Iterable, NamedTuple

from apps.goals.domain.entities import GoalEntity
from apps.goals.domain.services.streak import compute_streak


class ProgressSummary(NamedTuple):
    completed_count: int
    total: int
    rate: float  # 0-100


class ReviewReport(NamedTuple):
    streak: int
    total_completed: int  # Suma zdarzeń ukończenia we wszystkich celach
    rates_by_frequency: Dict[str, float]


def compute_rates_by_frequency(goals: Iterable[GoalEntity]) -> Dict[str, float]:
    """
    Średnia liczba zdarzeń ukończenia na cel (x100), per częstotliwość.

    Licznik to wszystkie zdarzenia z historii, nie liczba celów, więc wynik
    może przekroczyć 100 (np. 2 cele DAILY z 3 i 1 wpisem -> 200.0).
    """
    # Grupowanie w kolejności pierwszego wystąpienia
    groups: Dict[str, list] = {}
    for goal in goals:
        groups.setdefault(goal.frequency.name, []).append(goal)

    rates = {}
    for name, members in groups.items():
        events = sum(len(g.completion_dates) for g in members)
        total = len(members)
        rates[name] = (events / total) * 100 if total > 0 else 0.0

    return rates


def compute_progress(goals: Iterable[GoalEntity]) -> ProgressSummary:
    goals = list(goals)
    completed_count = sum(1 for g in goals if g.completed)
    total = len(goals)
    rate = (completed_count / total) * 100 if total > 0 else 0.0
    return ProgressSummary(completed_count, total, rate)


def compute_review(goals: Iterable[GoalEntity], today) -> ReviewReport:
    """Raport przeglądu: streak, łączna liczba ukończeń i skuteczność per częstotliwość."""
    goals = list(goals)
    return ReviewReport(
        streak=compute_streak(goals, today),
        total_completed=sum(len(g.completion_dates) for g in goals),
        rates_by_frequency=compute_rates_by_frequency(goals),
    )


def format_rate(rate: float) -> str:
    return f"{rate:.2f}"
