"""Slack notification integration."""

from slack_aws_cost_notifier.notifications.slack.bot import (
    SlackBotClient,
    SlackClientFactory,
    SlackNotifier,
)
from slack_aws_cost_notifier.notifications.slack.formatter import (
    SlackFormatter,
    format_cost_message,
)

__all__ = [
    "SlackBotClient",
    "SlackClientFactory",
    "SlackNotifier",
    "SlackFormatter",
    "format_cost_message",
]
