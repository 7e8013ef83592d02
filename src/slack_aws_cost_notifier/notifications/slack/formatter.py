"""Slack message formatting."""

from datetime import UTC, datetime
from typing import Any

from slack_aws_cost_notifier.collectors.base import Cost, DateInterval, Granularity


def format_cost_message(cost: Cost) -> str:
    """Plain-text usage summary, e.g. ``Usage cost: 100.0 USD``."""
    return f"Usage cost: {cost.amount!r} {cost.unit}"


def _get_utc_timestamp() -> str:
    """Get current timestamp formatted for display."""
    return datetime.now(UTC).strftime("%b %d, %Y at %H:%M UTC")


class SlackFormatter:
    """Format cost summaries as plain text or Slack Block Kit."""

    GRANULARITY_LABEL = {
        Granularity.MONTHLY: "Monthly",
        Granularity.DAILY: "Daily",
        Granularity.HOURLY: "Hourly",
    }

    def format_cost_text(self, cost: Cost) -> str:
        """Plain-text usage summary."""
        return format_cost_message(cost)

    def format_cost_blocks(
        self,
        cost: Cost,
        window: DateInterval,
        granularity: Granularity,
    ) -> dict[str, Any]:
        """
        Format a usage summary as a Block Kit message.

        The plain-text summary is used as the notification fallback.

        Args:
            cost: Distilled cost.
            window: Query window the cost was read from.
            granularity: Granularity of the query.

        Returns:
            Dict with ``text`` and ``blocks`` keys.
        """
        text = self.format_cost_text(cost)
        amount = f"{cost.amount:,.2f} {cost.unit}".strip()

        blocks: list[dict[str, Any]] = [
            {
                "type": "header",
                "text": {"type": "plain_text", "text": ":moneybag: AWS Usage Cost"},
            },
            {
                "type": "section",
                "fields": [
                    {"type": "mrkdwn", "text": f"*Amount:*\n{amount}"},
                    {
                        "type": "mrkdwn",
                        "text": f"*Granularity:*\n{self.GRANULARITY_LABEL[granularity]}",
                    },
                    {
                        "type": "mrkdwn",
                        "text": f"*Period:*\n{window.start_str} to {window.end_str}",
                    },
                ],
            },
            {
                "type": "context",
                "elements": [
                    {"type": "mrkdwn", "text": f"Generated {_get_utc_timestamp()}"},
                ],
            },
        ]

        return {"text": text, "blocks": blocks}
