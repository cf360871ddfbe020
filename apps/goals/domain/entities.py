# apps/goals/domain/entities.py
import copy
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional

from apps.goals.domain.dates import DEFAULT_DAY, format_day, parse_day
from apps.goals.domain.exceptions import InvalidInput


class GoalFrequency(str, Enum):
    DAILY = 'DAILY'
    WEEKLY = 'WEEKLY'
    MONTHLY = 'MONTHLY'
    YEARLY = 'YEARLY'

    @classmethod
    def coerce(cls, value) -> 'GoalFrequency':
        """Przyjmuje członka enuma albo jego nazwę (wielkość liter bez znaczenia)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise InvalidInput(f"Unknown goal frequency: {value!r}")


DEFAULT_START_TIME = "08:00"
DEFAULT_END_TIME = "18:00"


@dataclass
class GoalEntity:
    id: Optional[int]  # Nadawane przez GoalStore przy dodaniu
    name: str
    frequency: GoalFrequency
    completed: bool = False  # Ręczna flaga "zrobione w tym cyklu", niezależna od historii

    # Zakres aktywności (włącznie)
    start_date: date = DEFAULT_DAY
    end_date: date = DEFAULT_DAY

    # Tylko opisowo, nie biorą udziału w obliczeniach
    start_time: str = DEFAULT_START_TIME
    end_time: str = DEFAULT_END_TIME

    # Kolejność wstawiania, bez duplikatów
    completion_dates: List[date] = field(default_factory=list)

    def __post_init__(self):
        # Tekst "YYYY-M-D" z zewnątrz -> date, historia bez duplikatów
        self.frequency = GoalFrequency.coerce(self.frequency)
        self.start_date = parse_day(self.start_date)
        self.end_date = parse_day(self.end_date)
        history = []
        for raw in self.completion_dates:
            day = parse_day(raw)
            if day not in history:
                history.append(day)
        self.completion_dates = history

    @property
    def completion_keys(self) -> List[str]:
        return [format_day(d) for d in self.completion_dates]

    def has_completion(self, day) -> bool:
        return parse_day(day) in self.completion_dates

    def is_active_on(self, day) -> bool:
        """Czy dzień mieści się w [start_date, end_date]."""
        return self.start_date <= parse_day(day) <= self.end_date

    def copy(self) -> 'GoalEntity':
        return copy.deepcopy(self)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'frequency': self.frequency.name,
            'completed': self.completed,
            'start_date': format_day(self.start_date),
            'end_date': format_day(self.end_date),
            'start_time': self.start_time,
            'end_time': self.end_time,
            'completion_dates': self.completion_keys,
        }
