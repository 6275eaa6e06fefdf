# reflect_server/services/stats.py
"""
Dashboard statistics for one user, built from the health entries only.
Windows are taken newest first (30 days / 7 days) and reversed to
chronological order before any trend is computed.
"""
import logging
from datetime import date
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from reflect_ai.core.health_score import compute_period_health_score, health_score_label
from reflect_ai.core.streak import calculate_day_streak, calculate_longest_streak
from reflect_ai.core.trend import calculate_trend, classify_trend
from reflect_ai.utils.metrics import MetricSnapshot
from reflect_server.schemas.schema_stats import Insight, MetricTrend, ResponseStats, WeeklySummary
from reflect_server.services.health_entries import list_entries, today_local

logger = logging.getLogger(__name__)

TREND_WINDOW = 30
WEEK_WINDOW = 7


def _metric(values: List[float]) -> MetricTrend:
    average = sum(values) / len(values) if values else 0.0
    trend = calculate_trend(values)
    return MetricTrend(
        average=round(average, 1),
        trend=round(trend, 1),
        direction=classify_trend(trend),
    )


def _insights(mood_trend: float, avg_sleep: float, total_exercise: int, avg_water: float) -> List[Insight]:
    insights = []
    if mood_trend > 10:
        insights.append(Insight(
            kind="mood",
            title="Great mood improvement!",
            description="Your mood has been trending upward. Keep up the great work!",
        ))
    if avg_sleep < 6:
        insights.append(Insight(
            kind="sleep",
            title="Sleep needs attention",
            description="Consider improving your sleep routine for better health.",
        ))
    if total_exercise < 150:
        insights.append(Insight(
            kind="exercise",
            title="More activity recommended",
            description="Try to increase your daily physical activity for better health.",
        ))
    if avg_water < 6:
        insights.append(Insight(
            kind="water",
            title="Stay hydrated",
            description="Aim for 8 glasses of water daily for optimal health.",
        ))
    return insights


def build_stats(entries: Sequence, today: Optional[date] = None) -> ResponseStats:
    """
    Args:
        entries: HealthEntry rows (or dicts), newest first
        today: reference day for the streak
    """
    today = today or today_local()
    window = [MetricSnapshot.from_record(e) for e in list(entries)[:TREND_WINDOW]]
    week = window[:WEEK_WINDOW]
    chronological = list(reversed(window))

    mood_values = [s.mood_value for s in chronological]
    mood = _metric(mood_values)
    sleep = _metric([s.sleep_hours for s in chronological])
    exercise = _metric([s.exercise_minutes for s in chronological])
    water = _metric([s.water_intake for s in chronological])
    total_exercise = sum(s.exercise_minutes for s in window)

    score = compute_period_health_score(window)

    insights = []
    if window:
        avg_sleep = sum(s.sleep_hours for s in window) / len(window)
        avg_water = sum(s.water_intake for s in window) / len(window)
        insights = _insights(calculate_trend(mood_values), avg_sleep, total_exercise, avg_water)

    return ResponseStats(
        total_entries=len(entries),
        day_streak=calculate_day_streak(entries, today=today),
        longest_streak=calculate_longest_streak(entries, today=today),
        window_days=len(window),
        health_score=score,
        health_score_label=health_score_label(score),
        mood=mood,
        sleep=sleep,
        exercise=exercise,
        water=water,
        total_exercise=total_exercise,
        weekly=WeeklySummary(
            days_tracked=len(week),
            total_exercise=sum(s.exercise_minutes for s in week),
            total_water=sum(s.water_intake for s in week),
        ),
        insights=insights,
    )


def get_user_stats(db: Session, user_id: str) -> ResponseStats:
    entries = list_entries(db, user_id)
    stats = build_stats(entries)
    logger.debug(f"stats user={user_id} entries={stats.total_entries} streak={stats.day_streak}")
    return stats
