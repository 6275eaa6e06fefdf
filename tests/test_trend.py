import pytest

from reflect_ai.core.trend import calculate_trend, classify_trend


def test_fewer_than_two_points():
    assert calculate_trend([]) == 0
    assert calculate_trend([4]) == 0


def test_later_half_higher_is_positive():
    assert calculate_trend([1, 1, 2, 2]) == pytest.approx(100.0)


def test_later_half_lower_is_negative():
    assert calculate_trend([2, 2, 1, 1]) == pytest.approx(-50.0)


def test_odd_length_puts_middle_in_second_half():
    # first [2], second [4, 6] -> (5 - 2) / 2
    assert calculate_trend([2, 4, 6]) == pytest.approx(150.0)


def test_zero_first_half_gives_zero():
    assert calculate_trend([0, 0, 3, 3]) == 0


def test_repeatable():
    series = [7.5, 6, 8, 5.5, 7]
    assert calculate_trend(series) == calculate_trend(series)


@pytest.mark.parametrize(
    "trend, direction",
    [(5.1, "up"), (5, "flat"), (0, "flat"), (-5, "flat"), (-5.1, "down"), (100, "up")],
)
def test_classify(trend, direction):
    assert classify_trend(trend) == direction


def test_negative_values_keep_their_sign():
    # means -1 -> -2: relative change is +100%
    assert calculate_trend([-1, -1, -2, -2]) == pytest.approx(100.0)
    assert calculate_trend([-2, -2, 2, 2]) == pytest.approx(-200.0)


def test_non_numeric_values_count_as_zero():
    assert calculate_trend([2, None, "x", float("nan")]) == pytest.approx(-100.0)
