# reflect_ai/core/trend.py
"""
Trend of a numeric series: percent change between the mean of the first half
and the mean of the second half.

Series are chronological (oldest first), so a positive trend means the more
recent half is higher. Callers holding newest-first rows reverse them first.
"""

from typing import Iterable, List

from reflect_ai.utils.metrics import to_number

TREND_THRESHOLD = 5.0


def calculate_trend(values: Iterable[float]) -> float:
    series: List[float] = [to_number(v) for v in values]
    if len(series) < 2:
        return 0.0

    mid = len(series) // 2
    first_half = series[:mid]
    second_half = series[mid:]

    first_avg = sum(first_half) / len(first_half)
    second_avg = sum(second_half) / len(second_half)
    if first_avg == 0:
        return 0.0

    return (second_avg - first_avg) / first_avg * 100


def classify_trend(trend: float) -> str:
    """"up" above +5%, "down" below -5%, otherwise "flat"."""
    if trend > TREND_THRESHOLD:
        return "up"
    if trend < -TREND_THRESHOLD:
        return "down"
    return "flat"
