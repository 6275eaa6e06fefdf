from datetime import date, datetime, timedelta

from reflect_ai.core.streak import calculate_day_streak, calculate_longest_streak

TODAY = date(2025, 11, 18)


def days_ago(n):
    return TODAY - timedelta(days=n)


def test_no_entries():
    assert calculate_day_streak([], today=TODAY) == 0
    assert calculate_longest_streak([], today=TODAY) == 0


def test_three_consecutive_days_ending_today():
    entries = [{"entry_date": days_ago(n)} for n in (0, 1, 2)]
    assert calculate_day_streak(entries, today=TODAY) == 3


def test_gap_stops_the_count():
    entries = [{"entry_date": days_ago(0)}, {"entry_date": days_ago(3)}]
    assert calculate_day_streak(entries, today=TODAY) == 1


def test_streak_alive_when_last_entry_was_yesterday():
    entries = [days_ago(1), days_ago(2)]
    assert calculate_day_streak(entries, today=TODAY) == 2


def test_streak_broken_after_two_days():
    entries = [days_ago(2), days_ago(3), days_ago(4)]
    assert calculate_day_streak(entries, today=TODAY) == 0


def test_order_and_duplicates_do_not_matter():
    entries = [days_ago(2), days_ago(0), days_ago(1), days_ago(0), days_ago(1)]
    assert calculate_day_streak(entries, today=TODAY) == 3


def test_time_of_day_is_ignored():
    entries = [
        datetime.combine(TODAY, datetime.min.time()) + timedelta(hours=23),
        datetime.combine(days_ago(1), datetime.min.time()) + timedelta(hours=1),
        "2025-11-16T08:30:00",
    ]
    assert calculate_day_streak(entries, today=TODAY) == 3


def test_future_dates_are_ignored():
    entries = [TODAY + timedelta(days=1), TODAY + timedelta(days=5), days_ago(0), days_ago(1)]
    assert calculate_day_streak(entries, today=TODAY) == 2


def test_only_future_dates():
    assert calculate_day_streak([TODAY + timedelta(days=2)], today=TODAY) == 0


def test_rows_with_entry_date_attribute():
    class Row:
        def __init__(self, d):
            self.entry_date = d

    assert calculate_day_streak([Row(days_ago(0)), Row(days_ago(1))], today=TODAY) == 2


def test_unparseable_dates_are_skipped():
    entries = ["not-a-date", None, {"entry_date": None}, days_ago(0)]
    assert calculate_day_streak(entries, today=TODAY) == 1


def test_longest_streak_looks_at_whole_history():
    entries = [days_ago(0)] + [days_ago(n) for n in range(10, 15)] + [days_ago(20), days_ago(21)]
    assert calculate_day_streak(entries, today=TODAY) == 1
    assert calculate_longest_streak(entries, today=TODAY) == 5
