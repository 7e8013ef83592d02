"""AWS Cost Explorer collector.

Cost Explorer API charges $0.01 per request.
"""

from __future__ import annotations

from datetime import date
from typing import Any

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError

from slack_aws_cost_notifier.collectors.base import (
    Cost,
    CostCollector,
    DateInterval,
    Granularity,
)
from slack_aws_cost_notifier.collectors.date_window import (
    WindowPolicy,
    resolve_date_window,
    today_utc,
)
from slack_aws_cost_notifier.collectors.report_parser import UNBLENDED_COST, extract_cost
from slack_aws_cost_notifier.errors import QueryFailedError


class CostExplorerCollector(CostCollector):
    """
    Collect the account's spend from AWS Cost Explorer.

    A single ``GetCostAndUsage`` call is made per collection; only the first
    result bucket is used.
    """

    collector_name = "cost_explorer"

    def __init__(
        self,
        region: str = "us-east-1",
        granularity: Granularity = Granularity.MONTHLY,
        metric: str = UNBLENDED_COST,
        window_policy: WindowPolicy = "fixed_lookback",
        max_attempts: int = 1,
        ce_client: boto3.client | None = None,
    ):
        """
        Initialize the Cost Explorer collector.

        Args:
            region: AWS region for the Cost Explorer API.
            granularity: Time bucketing requested from Cost Explorer.
            metric: Cost metric to extract (e.g. UnblendedCost).
            window_policy: How the query window is derived from the as-of date.
            max_attempts: Total attempts per query, retries handled by botocore.
            ce_client: Optional boto3 Cost Explorer client.
        """
        self.region = region
        self.granularity = Granularity(granularity)
        self.metric = metric
        self.window_policy = window_policy
        self.max_attempts = max_attempts
        self._ce_client = ce_client

    @property
    def ce_client(self) -> boto3.client:
        """Get or create Cost Explorer client."""
        if self._ce_client is None:
            self._ce_client = boto3.client(
                "ce",
                region_name=self.region,
                config=BotoConfig(
                    retries={"max_attempts": self.max_attempts, "mode": "standard"}
                ),
            )
        return self._ce_client

    def window(self, as_of: date | None = None) -> DateInterval:
        """Query window ending at ``as_of`` (defaults to today, UTC)."""
        if as_of is None:
            as_of = today_utc()
        return resolve_date_window(as_of, self.granularity, self.window_policy)

    def query_cost(
        self,
        window: DateInterval,
        granularity: Granularity | None = None,
        metric: str | None = None,
    ) -> dict[str, Any]:
        """
        Run ``GetCostAndUsage`` for the window.

        Args:
            window: Query window.
            granularity: Overrides the collector's granularity.
            metric: Overrides the collector's metric.

        Returns:
            The raw Cost Explorer response.

        Raises:
            QueryFailedError: On any transport, auth or service error. The
                botocore exception is kept as ``__cause__``.
        """
        granularity = Granularity(granularity or self.granularity)
        metric = metric or self.metric

        try:
            return self.ce_client.get_cost_and_usage(
                TimePeriod=window.as_time_period(),
                Granularity=granularity.value,
                Metrics=[metric],
            )
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "")
            raise QueryFailedError(
                f"Cost Explorer request failed ({error_code or 'unknown'}): {e}"
            ) from e
        except BotoCoreError as e:
            raise QueryFailedError(f"Cost Explorer request failed: {e}") from e

    def collect(self, as_of: date | None = None) -> Cost:
        """
        Collect the cost for the window ending at ``as_of``.

        Returns:
            Cost distilled from the first result bucket.
        """
        window = self.window(as_of)
        print(
            f"Querying Cost Explorer: {window.start_str} -> {window.end_str} "
            f"({self.granularity.value}, {self.metric})"
        )
        report = self.query_cost(window)
        return extract_cost(report, self.metric)
