"""Query window calculation for Cost Explorer requests."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from typing import Literal

from slack_aws_cost_notifier.collectors.base import DateInterval, Granularity

WindowPolicy = Literal["fixed_lookback", "granularity"]

LOOKBACK = timedelta(days=1)


def today_utc() -> date:
    """Current calendar date in UTC."""
    return datetime.now(UTC).date()


def compute_date_window(as_of: date) -> DateInterval:
    """
    One-day lookback window ending at ``as_of``.

    The same window is used for every granularity, so a MONTHLY query only
    covers the day before ``as_of``.
    """
    return DateInterval(start=as_of - LOOKBACK, end=as_of)


def window_for_granularity(as_of: date, granularity: Granularity) -> DateInterval:
    """
    Window sized to the requested granularity.

    MONTHLY covers month-to-date for the day before ``as_of`` (the whole
    previous month when ``as_of`` is the 1st). DAILY and HOURLY keep the
    one-day lookback.
    """
    if granularity is Granularity.MONTHLY:
        last_day = as_of - LOOKBACK
        return DateInterval(start=last_day.replace(day=1), end=as_of)
    return compute_date_window(as_of)


def resolve_date_window(
    as_of: date,
    granularity: Granularity,
    policy: WindowPolicy = "fixed_lookback",
) -> DateInterval:
    """Pick the window for ``as_of`` according to the configured policy."""
    if policy == "granularity":
        return window_for_granularity(as_of, granularity)
    return compute_date_window(as_of)
