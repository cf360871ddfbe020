import threading
from datetime import date

import pytest

from apps.goals.adapters.memory_repository import InMemoryGoalRepository
from apps.goals.application.store import GoalStore, local_today
from apps.goals.domain.entities import GoalFrequency
from apps.goals.domain.exceptions import InvalidInput
from tests.conftest import TODAY, make_goal


def test_add_creates_fresh_goal(store):
    goal = store.add("Czytanie", GoalFrequency.DAILY, "2025-1-5", "2025-2-5")

    assert goal.id is not None
    assert goal.completed is False
    assert goal.completion_dates == []
    assert goal.start_date == date(2025, 1, 5)
    assert goal.end_date == date(2025, 2, 5)
    assert len(store) == 1


def test_add_accepts_frequency_name(store):
    assert store.add("Basen", "weekly").frequency is GoalFrequency.WEEKLY


@pytest.mark.parametrize("name", ["", "   ", None])
def test_add_rejects_empty_name(store, name):
    with pytest.raises(InvalidInput):
        store.add(name, GoalFrequency.DAILY, "2025-1-1", "2025-1-2")
    assert len(store) == 0


def test_add_rejects_bad_frequency_or_date_without_state_change(store):
    with pytest.raises(InvalidInput):
        store.add("Basen", "HOURLY")
    with pytest.raises(InvalidInput):
        store.add("Basen", GoalFrequency.DAILY, start_date="jutro")
    assert len(store) == 0


def test_duplicate_names_are_separate_goals(store):
    first = store.add("Woda", GoalFrequency.DAILY)
    second = store.add("Woda", GoalFrequency.DAILY)
    assert first.id != second.id

    store.remove(first)
    assert [g.id for g in store.goals()] == [second.id]


def test_remove_absent_goal_is_noop(store):
    store.add("Czytanie", GoalFrequency.DAILY)
    before = store.goals()

    store.remove(make_goal("Obcy", goal_id=999))
    store.remove(make_goal("Bez ID"))
    store.remove(12345)

    assert store.goals() == before


def test_remove_twice_is_noop(store):
    goal = store.add("Czytanie", GoalFrequency.DAILY)
    store.remove(goal)
    store.remove(goal)
    assert len(store) == 0


def test_set_frequency_last_write_wins(store):
    goal = store.add("Czytanie", GoalFrequency.DAILY)
    for frequency in (GoalFrequency.WEEKLY, "MONTHLY", GoalFrequency.YEARLY):
        store.set_frequency(goal, frequency)
    assert store.get(goal).frequency is GoalFrequency.YEARLY


def test_set_frequency_on_absent_goal_is_noop(store):
    store.set_frequency(make_goal(goal_id=42), GoalFrequency.WEEKLY)
    assert len(store) == 0


def test_set_completed_records_today(store):
    goal = store.add("Czytanie", GoalFrequency.DAILY)
    store.set_completed(goal, True)

    stored = store.get(goal)
    assert stored.completed is True
    assert stored.completion_dates == [TODAY]


def test_set_completed_false_does_not_record(store):
    goal = store.add("Czytanie", GoalFrequency.DAILY)
    store.set_completed(goal, False)
    assert store.get(goal).completion_dates == []


def test_toggle_twice_same_day_keeps_one_entry(store):
    goal = store.add("Czytanie", GoalFrequency.DAILY)
    store.set_completed(goal, True)
    store.set_completed(goal, False)
    store.set_completed(goal, True)
    assert store.get(goal).completion_dates == [TODAY]


def test_set_completed_with_explicit_day(store):
    goal = store.add("Czytanie", GoalFrequency.DAILY)
    store.set_completed(goal, True, today="2025-2-28")
    store.set_completed(goal, False)
    store.set_completed(goal, True)
    assert store.get(goal).completion_keys == ["2025-02-28", "2025-03-01"]


def test_snapshots_cannot_corrupt_store(store):
    goal = store.add("Czytanie", GoalFrequency.DAILY)
    snapshot = store.get(goal)
    snapshot.name = "Zmienione"
    snapshot.completion_dates.append(TODAY)

    for g in store.goals():
        g.completed = True

    stored = store.get(goal)
    assert stored.name == "Czytanie"
    assert stored.completion_dates == []
    assert stored.completed is False


def test_store_reports(store):
    a = store.add("A", GoalFrequency.DAILY)
    store.add("B", GoalFrequency.DAILY)
    store.set_completed(a, True)
    store.record_completion(a, "2025-2-28")

    assert store.streak() == 2
    assert store.rates_by_frequency() == {"DAILY": 100.0}
    assert store.progress() == (1, 2, 50.0)
    assert store.review().total_completed == 2


def test_record_completion_on_absent_goal(store):
    assert store.record_completion(make_goal(goal_id=3)) is False


def test_load_and_save_roundtrip():
    repository = InMemoryGoalRepository([
        make_goal("A", history=[TODAY], goal_id=5),
        make_goal("B", GoalFrequency.WEEKLY, completed=True, goal_id=9),
    ])
    store = GoalStore.load(repository, clock=lambda: TODAY)

    added = store.add("C", GoalFrequency.MONTHLY)
    assert added.id == 10

    store.save(repository)
    loaded = repository.load_all()
    assert [g.name for g in loaded] == ["A", "B", "C"]
    assert loaded[0].completion_dates == [TODAY]


def test_concurrent_completion_is_serialized(store):
    goal = store.add("Czytanie", GoalFrequency.DAILY)

    def worker():
        for _ in range(50):
            store.record_completion(goal)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.get(goal).completion_dates == [TODAY]


def test_local_today_follows_configured_time_zone(settings):
    from django.utils import timezone

    settings.TIME_ZONE = "Pacific/Kiritimati"
    assert local_today() == timezone.localdate()

    settings.TIME_ZONE = "Etc/GMT+12"
    assert local_today() == timezone.localdate()


def test_local_today_without_tz_support_uses_system_clock(settings):
    settings.USE_TZ = False
    assert local_today() == date.today()


@pytest.mark.parametrize("name", [123, 0.5, ["Czytanie"]])
def test_add_rejects_non_text_name(store, name):
    with pytest.raises(InvalidInput):
        store.add(name, GoalFrequency.DAILY)
    assert len(store) == 0


@pytest.mark.parametrize("raw_id", [True, False])
def test_bool_is_not_a_goal_id(store, raw_id):
    goal = store.add("Czytanie", GoalFrequency.DAILY)
    assert goal.id == 1

    store.remove(raw_id)
    store.set_frequency(raw_id, GoalFrequency.WEEKLY)
    store.set_completed(raw_id, True)

    assert raw_id not in store
    stored = store.get(goal)
    assert stored.frequency is GoalFrequency.DAILY
    assert stored.completed is False
    assert len(store) == 1
