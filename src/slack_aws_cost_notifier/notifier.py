"""Collect the account's cost and post it to Slack."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from slack_aws_cost_notifier.collectors.aws_cost_explorer import CostExplorerCollector
from slack_aws_cost_notifier.collectors.base import Cost, DateInterval
from slack_aws_cost_notifier.collectors.date_window import today_utc
from slack_aws_cost_notifier.config.loader import require_slack_settings
from slack_aws_cost_notifier.config.schema import Config
from slack_aws_cost_notifier.notifications.slack.bot import (
    SlackBotClient,
    SlackClientFactory,
)
from slack_aws_cost_notifier.notifications.slack.formatter import SlackFormatter


@dataclass
class DeliveryResult:
    """Outcome of a single notifier run."""

    cost: Cost
    window: DateInterval
    message: str
    response: dict[str, Any] = field(default_factory=dict)
    delivered: bool = False


def build_collector(config: Config) -> CostExplorerCollector:
    """Create the Cost Explorer collector from configuration."""
    return CostExplorerCollector(
        region=config.aws.region,
        granularity=config.cost_query.granularity,
        metric=config.cost_query.metric,
        window_policy=config.cost_query.window_policy,
        max_attempts=config.cost_query.max_attempts,
    )


def build_slack_factory(config: Config) -> SlackClientFactory:
    """Slack client factory honouring the configured timeout."""

    def factory(token: str, channel_id: str) -> SlackBotClient:
        return SlackBotClient(
            bot_token=token,
            channel_id=channel_id,
            timeout=config.slack.timeout_seconds,
        )

    return factory


def run_notifier(
    config: Config,
    collector: CostExplorerCollector | None = None,
    slack_factory: SlackClientFactory | None = None,
    as_of: date | None = None,
    dry_run: bool = False,
) -> DeliveryResult:
    """
    Query the cost for the window ending at ``as_of`` and post it to Slack.

    Steps run strictly in order and any failure propagates unchanged, so no
    message is ever posted for a failed query.

    Args:
        config: Loaded configuration.
        collector: Cost Explorer collector. Built from config if None.
        slack_factory: ``(token, channel_id) -> client``. Defaults to the
            real Slack Web API client.
        as_of: Exclusive end of the query window. Defaults to today (UTC).
        dry_run: Build the message but don't post it.

    Returns:
        DeliveryResult with the Slack acknowledgement.

    Raises:
        CostNotifierError: Any failure, see slack_aws_cost_notifier.errors.
    """
    token = channel_id = None
    if not dry_run and config.slack.enabled:
        token, channel_id = require_slack_settings(config)

    collector = collector or build_collector(config)
    slack_factory = slack_factory or build_slack_factory(config)
    formatter = SlackFormatter()

    as_of = as_of or today_utc()
    window = collector.window(as_of)
    cost = collector.collect(as_of)
    print(f"Cost for {window.start_str} -> {window.end_str}: {cost.amount} {cost.unit}")

    message = formatter.format_cost_text(cost)
    result = DeliveryResult(cost=cost, window=window, message=message)

    if token is None:
        print(f"Skipping Slack post: {message}")
        return result

    client = slack_factory(token, channel_id)
    if config.slack.use_blocks:
        payload = formatter.format_cost_blocks(cost, window, collector.granularity)
        result.response = client.send_blocks(payload["blocks"], text=payload["text"])
    else:
        result.response = client.send_message(message)
    result.delivered = True

    return result
