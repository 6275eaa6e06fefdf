# reflect_ai/utils/metrics.py
"""
Health metric records for the analytic core
- MetricSnapshot: one day's metrics with explicit required/optional fields
- every coercion of loosely typed input happens here, not at call sites
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

MOOD_VALUES = {
    "excellent": 5,
    "good": 4,
    "neutral": 3,
    "poor": 2,
    "terrible": 1,
}
DEFAULT_MOOD_VALUE = 3


def to_number(value: Any) -> float:
    """Signed parse: blanks, garbage and NaN become 0.0, negatives are kept."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


def to_float(value: Any) -> float:
    """Metric parse: like to_number, but negatives also become 0.0."""
    return max(to_number(value), 0.0)


def to_int(value: Any) -> int:
    number = to_float(value)
    if math.isinf(number):
        return 0
    return int(number)


def to_date(value: Any) -> Optional[date]:
    """Strip the time of day; unparseable values give None."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def mood_value(mood: Any) -> int:
    """excellent=5 ... terrible=1, anything else counts as neutral (3)."""
    key = getattr(mood, "value", mood)
    if not isinstance(key, str):
        return DEFAULT_MOOD_VALUE
    return MOOD_VALUES.get(key.strip().lower(), DEFAULT_MOOD_VALUE)


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


@dataclass(frozen=True)
class MetricSnapshot:
    """One calendar day of metrics as the analytic functions see it."""

    sleep_hours: float = 0.0
    exercise_minutes: int = 0
    water_intake: float = 0.0
    mood: Optional[str] = None
    entry_date: Optional[date] = None

    @property
    def mood_value(self) -> int:
        return mood_value(self.mood)

    @classmethod
    def from_record(cls, record: Any) -> "MetricSnapshot":
        """
        Build a snapshot from an ORM row, a pydantic model, a dict or another
        snapshot.

        Args:
            record: anything exposing mood / sleep_hours / exercise_minutes /
                water_intake / entry_date as attributes or keys

        Returns:
            MetricSnapshot with every numeric field coerced
        """
        if isinstance(record, cls):
            return record

        mood = _field(record, "mood")
        mood = getattr(mood, "value", mood)
        if mood is not None and not isinstance(mood, str):
            logger.debug(f"ignoring non-string mood: {mood!r}")
            mood = None

        return cls(
            sleep_hours=to_float(_field(record, "sleep_hours")),
            exercise_minutes=to_int(_field(record, "exercise_minutes")),
            water_intake=to_float(_field(record, "water_intake")),
            mood=mood or None,
            entry_date=to_date(_field(record, "entry_date")),
        )
