"""Pydantic configuration schema for Slack AWS Cost Notifier."""

from typing import Literal

from pydantic import BaseModel, Field

from slack_aws_cost_notifier.collectors.base import Granularity


class AWSConfig(BaseModel):
    """AWS account configuration."""

    region: str = "us-east-1"  # Cost Explorer is served from us-east-1


class CostQueryConfig(BaseModel):
    """Cost Explorer query configuration."""

    granularity: Granularity = Granularity.MONTHLY
    metric: str = "UnblendedCost"
    window_policy: Literal["fixed_lookback", "granularity"] = "fixed_lookback"
    max_attempts: int = Field(default=1, ge=1, le=10)  # 1 = no retries


class SlackConfig(BaseModel):
    """Slack integration configuration."""

    enabled: bool = True
    token: str | None = None  # Bot User OAuth Token (xoxb-...)
    channel_id: str | None = None
    use_blocks: bool = False
    timeout_seconds: float = Field(default=10.0, gt=0)


class ScheduleConfig(BaseModel):
    """Notification schedule configuration."""

    hours: list[int] = Field(default=[9])  # UTC hours


class Config(BaseModel):
    """Root configuration for Slack AWS Cost Notifier."""

    environment: Literal["dev", "staging", "prod"] = "dev"

    aws: AWSConfig = Field(default_factory=AWSConfig)
    cost_query: CostQueryConfig = Field(default_factory=CostQueryConfig)
    slack: SlackConfig = Field(default_factory=SlackConfig)
    schedule: ScheduleConfig = Field(default_factory=ScheduleConfig)
