"""Distil a Cost Explorer ``GetCostAndUsage`` response into a single cost.

Responses are treated as optional at almost every level. Only two
conditions surface as failures the user cares about: no result bucket, and
an amount that is not a number. Missing totals or a missing metric are also
fatal; a missing amount or unit falls back to ``"0"`` and ``""``.
"""

from __future__ import annotations

import re
from typing import Any

from slack_aws_cost_notifier.collectors.base import Cost
from slack_aws_cost_notifier.errors import (
    AmountParseError,
    MetricNotFoundError,
    MissingTotalsError,
    NoResultBucketError,
)

UNBLENDED_COST = "UnblendedCost"

DEFAULT_AMOUNT = "0"
DEFAULT_UNIT = ""

# Plain decimal or exponent forms plus inf/infinity/nan. No whitespace or
# digit separators.
AMOUNT_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def extract_cost(report: dict[str, Any], metric_name: str = UNBLENDED_COST) -> Cost:
    """
    Extract the cost for ``metric_name`` from the first result bucket.

    Args:
        report: Raw ``get_cost_and_usage`` response.
        metric_name: Metric key in the bucket's ``Total`` mapping.

    Returns:
        Cost with the parsed amount and its currency unit.

    Raises:
        NoResultBucketError: ``ResultsByTime`` is missing or empty.
        MissingTotalsError: The first bucket has no ``Total``.
        MetricNotFoundError: ``metric_name`` is not in ``Total``.
        AmountParseError: ``Amount`` is not numeric.
    """
    results_by_time = report.get("ResultsByTime")
    if results_by_time is None:
        results_by_time = []

    if not results_by_time:
        raise NoResultBucketError("Cost report contains no result buckets")
    first_result = results_by_time[0]

    total = first_result.get("Total")
    if total is None:
        raise MissingTotalsError("First result bucket has no totals")

    if metric_name not in total:
        raise MetricNotFoundError(metric_name)
    metric_value = total[metric_name] or {}

    amount = metric_value.get("Amount")
    if amount is None:
        amount = DEFAULT_AMOUNT

    if not isinstance(amount, str) or not AMOUNT_PATTERN.fullmatch(amount):
        raise AmountParseError(str(amount))
    parsed_amount = float(amount)

    unit = metric_value.get("Unit")
    if unit is None:
        unit = DEFAULT_UNIT

    return Cost(amount=parsed_amount, unit=unit)
