"""Tests for query window calculation."""

from datetime import date, datetime, timedelta

import pytest

from slack_aws_cost_notifier.collectors.base import DateInterval, Granularity
from slack_aws_cost_notifier.collectors.date_window import (
    compute_date_window,
    resolve_date_window,
    window_for_granularity,
)


class TestComputeDateWindow:
    """Tests for the one-day lookback window."""

    def test_one_day_lookback(self):
        window = compute_date_window(date(2024, 3, 15))
        assert window.start_str == "2024-03-14"
        assert window.end_str == "2024-03-15"

    @pytest.mark.parametrize(
        "as_of, expected_start",
        [
            (date(2024, 3, 1), "2024-02-29"),  # leap year
            (date(2023, 3, 1), "2023-02-28"),
            (date(2025, 1, 1), "2024-12-31"),
            (date(1, 1, 2), "0001-01-01"),
        ],
    )
    def test_month_and_year_boundaries(self, as_of, expected_start):
        window = compute_date_window(as_of)
        assert window.start_str == expected_start
        assert window.end == as_of

    def test_start_before_end_across_a_year(self):
        day = date(2024, 1, 1)
        for offset in range(366):
            as_of = day + timedelta(days=offset)
            window = compute_date_window(as_of)
            assert window.start == as_of - timedelta(days=1)
            assert window.start < window.end

    def test_format_reparses_to_same_date(self):
        window = compute_date_window(date(2024, 3, 15))
        assert datetime.strptime(window.start_str, "%Y-%m-%d").date() == window.start
        assert datetime.strptime(window.end_str, "%Y-%m-%d").date() == window.end

    def test_time_period_mapping(self):
        window = compute_date_window(date(2024, 3, 15))
        assert window.as_time_period() == {"Start": "2024-03-14", "End": "2024-03-15"}


class TestDateInterval:
    """Tests for DateInterval invariants."""

    def test_rejects_empty_interval(self):
        with pytest.raises(ValueError):
            DateInterval(start=date(2024, 3, 15), end=date(2024, 3, 15))

    def test_rejects_reversed_interval(self):
        with pytest.raises(ValueError):
            DateInterval(start=date(2024, 3, 16), end=date(2024, 3, 15))


class TestGranularityWindow:
    """Tests for the granularity-sized window."""

    def test_monthly_is_month_to_date(self):
        window = window_for_granularity(date(2024, 3, 15), Granularity.MONTHLY)
        assert window.as_time_period() == {"Start": "2024-03-01", "End": "2024-03-15"}

    def test_monthly_on_first_covers_previous_month(self):
        window = window_for_granularity(date(2024, 3, 1), Granularity.MONTHLY)
        assert window.as_time_period() == {"Start": "2024-02-01", "End": "2024-03-01"}

    def test_monthly_on_second_is_single_day(self):
        window = window_for_granularity(date(2024, 3, 2), Granularity.MONTHLY)
        assert window.as_time_period() == {"Start": "2024-03-01", "End": "2024-03-02"}

    @pytest.mark.parametrize("granularity", [Granularity.DAILY, Granularity.HOURLY])
    def test_daily_and_hourly_keep_lookback(self, granularity):
        window = window_for_granularity(date(2024, 3, 15), granularity)
        assert window == compute_date_window(date(2024, 3, 15))


class TestResolveDateWindow:
    """Tests for window policy dispatch."""

    def test_fixed_lookback_ignores_granularity(self):
        window = resolve_date_window(date(2024, 3, 15), Granularity.MONTHLY)
        assert window.start_str == "2024-03-14"

    def test_granularity_policy(self):
        window = resolve_date_window(date(2024, 3, 15), Granularity.MONTHLY, "granularity")
        assert window.start_str == "2024-03-01"
