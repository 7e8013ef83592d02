"""Notification integrations for Slack AWS Cost Notifier."""

from slack_aws_cost_notifier.notifications.slack.bot import SlackBotClient
from slack_aws_cost_notifier.notifications.slack.formatter import (
    SlackFormatter,
    format_cost_message,
)

__all__ = [
    "SlackBotClient",
    "SlackFormatter",
    "format_cost_message",
]
