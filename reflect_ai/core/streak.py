# reflect_ai/core/streak.py
"""
Day streaks over dated entries
- current streak: consecutive days ending today or yesterday
- longest streak: best run anywhere in the history
Entries dated after ``today`` are ignored.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Any, Iterable, List, Optional

from reflect_ai.utils.metrics import to_date

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


def _entry_date(entry: Any) -> Optional[date]:
    if isinstance(entry, (date, datetime, str)):
        return to_date(entry)
    if isinstance(entry, dict):
        return to_date(entry.get("entry_date"))
    return to_date(getattr(entry, "entry_date", None))


def unique_entry_dates(entries: Iterable[Any], today: date) -> List[date]:
    """Distinct entry dates, most recent first, nothing after ``today``."""
    dates = set()
    skipped = 0
    for entry in entries:
        d = _entry_date(entry)
        if d is None:
            continue
        if d > today:
            skipped += 1
            continue
        dates.add(d)

    if skipped:
        logger.info(f"ignored {skipped} future-dated entries (today={today})")
    return sorted(dates, reverse=True)


def calculate_day_streak(entries: Iterable[Any], today: Optional[date] = None) -> int:
    """
    Number of consecutive days, counted backwards from the most recent entry.

    Args:
        entries: HealthEntry rows, dicts with ``entry_date``, or plain dates
        today: reference day (defaults to the local date)

    Returns:
        0 when there are no entries or the most recent one is older than yesterday
    """
    today = today or date.today()
    dates = unique_entry_dates(entries, today)
    if not dates:
        return 0

    most_recent = dates[0]
    if (today - most_recent).days > 1:
        return 0

    streak = 0
    expected = most_recent
    for d in dates:
        if d != expected:
            break
        streak += 1
        expected -= ONE_DAY

    return streak


def calculate_longest_streak(entries: Iterable[Any], today: Optional[date] = None) -> int:
    today = today or date.today()
    dates = unique_entry_dates(entries, today)
    if not dates:
        return 0

    longest = run = 1
    for newer, older in zip(dates, dates[1:]):
        if newer - older == ONE_DAY:
            run += 1
            longest = max(longest, run)
        else:
            run = 1
    return longest
