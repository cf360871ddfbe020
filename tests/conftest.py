from datetime import date, timedelta

import pytest

from apps.goals.application.store import GoalStore
from apps.goals.domain.entities import GoalEntity, GoalFrequency

TODAY = date(2025, 3, 1)


def days_ago(n):
    return TODAY - timedelta(days=n)


def make_goal(name="Czytanie", frequency=GoalFrequency.DAILY, completed=False, history=(), goal_id=None):
    return GoalEntity(
        id=goal_id,
        name=name,
        frequency=frequency,
        completed=completed,
        completion_dates=list(history),
    )


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def store():
    return GoalStore(clock=lambda: TODAY)
