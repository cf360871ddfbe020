from apps.goals.domain.services.completion import CompletionRecorder, record_completion
from apps.goals.domain.services.reports import (
    ProgressSummary,
    ReviewReport,
    compute_progress,
    compute_rates_by_frequency,
    compute_review,
    format_rate,
)
from apps.goals.domain.services.streak import StreakCalculator, compute_streak

__all__ = [
    "CompletionRecorder",
    "ProgressSummary",
    "ReviewReport",
    "StreakCalculator",
    "compute_progress",
    "compute_rates_by_frequency",
    "compute_review",
    "compute_streak",
    "format_rate",
    "record_completion",
]
