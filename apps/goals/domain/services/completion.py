# apps/goals/domain/services/completion.py
import logging

from apps.goals.domain.dates import format_day, parse_day
from apps.goals.domain.entities import GoalEntity

logger = logging.getLogger(__name__)


class CompletionRecorder:
    def record_completion(self, goal: GoalEntity, today) -> bool:
        """
        Dopisuje dzisiejszą datę do historii celu (idempotentnie).
        Zwraca True, jeśli powstało nowe zdarzenie ukończenia.
        """
        day = parse_day(today)

        # Jeden wpis na dzień
        if day in goal.completion_dates:
            logger.debug("Goal %r already completed on %s", goal.name, format_day(day))
            return False

        goal.completion_dates.append(day)
        logger.debug("Goal %r completed on %s", goal.name, format_day(day))
        return True


_default_recorder = CompletionRecorder()


def record_completion(goal: GoalEntity, today) -> bool:
    return _default_recorder.record_completion(goal, today)
