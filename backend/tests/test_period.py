from datetime import datetime

import pytest

from finance_tracker.services.period import (
    DateRange,
    current_month_token,
    current_year_token,
    is_month_token,
    is_year_token,
    month_of,
    month_range,
    year_range,
    year_ranges,
)

from tests.factories import fixed_clock


def test_month_range_covers_whole_month():
    period = month_range("2024-03")
    assert period.start == datetime(2024, 3, 1, 0, 0, 0, 0)
    assert period.end == datetime(2024, 3, 31, 23, 59, 59, 999000)


@pytest.mark.parametrize(
    "token, last_day",
    [
        ("2024-02", 29),  # leap year
        ("2023-02", 28),
        ("1900-02", 28),  # century, not a leap year
        ("2000-02", 29),
        ("2024-04", 30),
        ("2024-12", 31),
    ],
)
def test_month_range_last_day(token, last_day):
    period = month_range(token)
    assert period.end.day == last_day
    assert (period.end.hour, period.end.minute, period.end.second) == (23, 59, 59)


def test_december_does_not_spill_into_next_year():
    period = month_range("2024-12")
    assert period.end.year == 2024
    assert period.end.month == 12


def test_range_is_inclusive_at_both_ends():
    period = month_range("2024-03")
    assert datetime(2024, 3, 1) in period
    assert datetime(2024, 3, 31, 23, 59, 59, 999000) in period
    assert datetime(2024, 2, 29, 23, 59, 59) not in period
    assert datetime(2024, 4, 1) not in period


def test_year_ranges_are_twelve_consecutive_months():
    ranges = year_ranges("2024")
    assert [token for token, _ in ranges] == [f"2024-{m:02d}" for m in range(1, 13)]
    for (_, earlier), (_, later) in zip(ranges, ranges[1:]):
        assert earlier.end < later.start
    assert all(isinstance(r, DateRange) for _, r in ranges)


def test_year_range_spans_january_to_december():
    period = year_range("2024")
    assert period.start == datetime(2024, 1, 1)
    assert period.end == datetime(2024, 12, 31, 23, 59, 59, 999000)


def test_current_tokens_come_from_clock():
    assert current_month_token(fixed_clock) == "2024-03"
    assert current_year_token(fixed_clock) == "2024"


def test_month_of_pads_month():
    assert month_of(datetime(2024, 7, 4, 18)) == "2024-07"


@pytest.mark.parametrize("token", ["2024-01", "2024-12", "1999-09"])
def test_valid_month_tokens(token):
    assert is_month_token(token)


@pytest.mark.parametrize("token", ["2024-13", "2024-00", "2024-3", "24-03", "2024/03", "2024-03-01", ""])
def test_malformed_month_tokens(token):
    assert not is_month_token(token)


def test_year_token_shape():
    assert is_year_token("2024")
    assert not is_year_token("24")
    assert not is_year_token("2024-01")
