"""Cost data collectors for Slack AWS Cost Notifier."""

from slack_aws_cost_notifier.collectors.base import (
    Cost,
    CostCollector,
    DateInterval,
    Granularity,
)
from slack_aws_cost_notifier.collectors.aws_cost_explorer import CostExplorerCollector
from slack_aws_cost_notifier.collectors.date_window import (
    compute_date_window,
    resolve_date_window,
    window_for_granularity,
)
from slack_aws_cost_notifier.collectors.report_parser import UNBLENDED_COST, extract_cost

__all__ = [
    "Cost",
    "CostCollector",
    "DateInterval",
    "Granularity",
    "CostExplorerCollector",
    "compute_date_window",
    "resolve_date_window",
    "window_for_granularity",
    "UNBLENDED_COST",
    "extract_cost",
]
