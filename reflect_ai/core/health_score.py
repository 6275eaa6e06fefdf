# reflect_ai/core/health_score.py
"""
Health score
- one day's metrics -> 0~100 composite (mood 30, sleep 25, exercise 25, water 20)
- a window of days -> the same formula over the window averages
The score is never stored; callers recompute it from raw metrics.
"""

import logging
import math
from typing import Any, Iterable

from reflect_ai.utils.metrics import MetricSnapshot

logger = logging.getLogger(__name__)

MOOD_WEIGHT = 30
SLEEP_WEIGHT = 25
EXERCISE_WEIGHT = 25
WATER_WEIGHT = 20

SLEEP_TARGET_HOURS = 8
# per day; period scores use the average day
EXERCISE_TARGET_MINUTES = 120
WATER_TARGET_GLASSES = 8

SCORE_LABELS = [
    (80, "Excellent"),
    (60, "Good"),
    (40, "Fair"),
]


def _weighted_score(
    mood_value: float,
    sleep_hours: float,
    exercise_minutes: float,
    water_intake: float,
) -> int:
    part_mood = (mood_value / 5) * MOOD_WEIGHT
    part_sleep = min(sleep_hours / SLEEP_TARGET_HOURS, 1) * SLEEP_WEIGHT
    part_exercise = min(exercise_minutes / EXERCISE_TARGET_MINUTES, 1) * EXERCISE_WEIGHT
    part_water = min(water_intake / WATER_TARGET_GLASSES, 1) * WATER_WEIGHT

    # half-up, not banker's rounding
    return int(math.floor(part_mood + part_sleep + part_exercise + part_water + 0.5))


def compute_health_score(metrics: Any = None) -> int:
    """
    Single-day health score.

    Args:
        metrics: HealthEntry row, dict or MetricSnapshot. Missing fields count
            as 0 and a missing mood counts as neutral.

    Returns:
        integer in [0, 100]
    """
    snapshot = MetricSnapshot.from_record(metrics or {})
    return _weighted_score(
        snapshot.mood_value,
        snapshot.sleep_hours,
        snapshot.exercise_minutes,
        snapshot.water_intake,
    )


def compute_period_health_score(entries: Iterable[Any]) -> int:
    """Score of the average day over ``entries``; 0 for an empty window."""
    snapshots = [MetricSnapshot.from_record(e) for e in entries]
    if not snapshots:
        return 0

    n = len(snapshots)
    score = _weighted_score(
        sum(s.mood_value for s in snapshots) / n,
        sum(s.sleep_hours for s in snapshots) / n,
        sum(s.exercise_minutes for s in snapshots) / n,
        sum(s.water_intake for s in snapshots) / n,
    )
    logger.debug(f"period health score over {n} entries: {score}")
    return score


def health_score_label(score: int) -> str:
    for threshold, label in SCORE_LABELS:
        if score >= threshold:
            return label
    return "Needs Improvement"
