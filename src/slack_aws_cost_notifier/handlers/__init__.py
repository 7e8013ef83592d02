"""Lambda handlers for Slack AWS Cost Notifier."""
