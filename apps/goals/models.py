# apps/goals/models.py
from django.db import models
from apps.goals.domain.entities import DEFAULT_END_TIME, DEFAULT_START_TIME, GoalFrequency
from apps.goals.domain.dates import DEFAULT_DAY


class Goal(models.Model):
    class Frequency(models.TextChoices):
        DAILY = GoalFrequency.DAILY.value, 'Codziennie'
        WEEKLY = GoalFrequency.WEEKLY.value, 'Co tydzień'
        MONTHLY = GoalFrequency.MONTHLY.value, 'Co miesiąc'
        YEARLY = GoalFrequency.YEARLY.value, 'Co rok'

    # ID encji domenowej (nadawane przez GoalStore), nie klucz główny
    entity_id = models.PositiveIntegerField(unique=True)
    name = models.CharField(max_length=200)
    frequency = models.CharField(max_length=20, choices=Frequency.choices, default=Frequency.DAILY)
    completed = models.BooleanField(default=False)

    start_date = models.DateField(default=DEFAULT_DAY)
    end_date = models.DateField(default=DEFAULT_DAY)
    start_time = models.CharField(max_length=5, default=DEFAULT_START_TIME)
    end_time = models.CharField(max_length=5, default=DEFAULT_END_TIME)

    # Kolejność na liście (GoalStore zachowuje kolejność dodawania)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ['position']

    def __str__(self):
        return f"{self.name} ({self.get_frequency_display()})"


class GoalCompletion(models.Model):
    goal = models.ForeignKey(Goal, on_delete=models.CASCADE, related_name='completions')
    date = models.DateField()

    class Meta:
        unique_together = ('goal', 'date')  # Jeden wpis na dzień
        ordering = ['id']

    def __str__(self):
        return f"{self.goal.name} @ {self.date}"
