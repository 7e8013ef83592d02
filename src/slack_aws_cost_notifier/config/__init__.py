"""Configuration management for Slack AWS Cost Notifier."""

from slack_aws_cost_notifier.config.schema import (
    AWSConfig,
    Config,
    CostQueryConfig,
    ScheduleConfig,
    SlackConfig,
)
from slack_aws_cost_notifier.config.loader import (
    load_config,
    load_slack_credentials,
    require_slack_settings,
)

__all__ = [
    "Config",
    "AWSConfig",
    "CostQueryConfig",
    "SlackConfig",
    "ScheduleConfig",
    "load_config",
    "load_slack_credentials",
    "require_slack_settings",
]
