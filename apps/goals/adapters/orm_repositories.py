# apps/goals/adapters/orm_repositories.py
from typing import Iterable, List
from django.db import transaction
from apps.goals.domain.entities import GoalEntity, GoalFrequency
from apps.goals.ports.repositories import IGoalRepository
from apps.goals.models import Goal as GoalModel, GoalCompletion


class DjangoGoalRepository(IGoalRepository):
    def to_entity(self, model: GoalModel) -> GoalEntity:
        """Konwertuje Model Django -> Czystą Encję."""
        return GoalEntity(
            id=model.entity_id,
            name=model.name,
            frequency=GoalFrequency(model.frequency),
            completed=model.completed,
            start_date=model.start_date,
            end_date=model.end_date,
            start_time=model.start_time,
            end_time=model.end_time,
            # Dzięki prefetch_related nie ma dodatkowych zapytań per cel
            completion_dates=[c.date for c in model.completions.all()],
        )

    def load_all(self) -> List[GoalEntity]:
        qs = GoalModel.objects.order_by('position').prefetch_related('completions')
        return [self.to_entity(g) for g in qs]

    @transaction.atomic
    def save_all(self, goals: Iterable[GoalEntity]) -> None:
        # Load-all / save-all: zapisany stan zastępujemy w całości
        GoalModel.objects.all().delete()

        completions = []
        for position, goal in enumerate(goals):
            if goal.id is None:
                raise ValueError("Goal id is required for saving (goals come from GoalStore)")
            obj = GoalModel.objects.create(
                entity_id=goal.id,
                name=goal.name,
                frequency=goal.frequency.value,
                completed=goal.completed,
                start_date=goal.start_date,
                end_date=goal.end_date,
                start_time=goal.start_time,
                end_time=goal.end_time,
                position=position,
            )
            completions.extend(GoalCompletion(goal=obj, date=day) for day in goal.completion_dates)

        # bulk_create zachowuje kolejność, więc id rosną zgodnie z historią
        GoalCompletion.objects.bulk_create(completions)
