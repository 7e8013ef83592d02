#!/usr/bin/env python3
"""CDK application entry point for Slack AWS Cost Notifier."""

import os
from pathlib import Path

import aws_cdk as cdk

from cdk.stacks.notifier_stack import NotifierStack
from slack_aws_cost_notifier.config import load_config

CONFIG_DIR = Path(__file__).parent.parent / "config"


def main():
    """Create and synthesize the CDK application."""
    app = cdk.App()

    environment = app.node.try_get_context("environment") or os.environ.get(
        "CONFIG_ENV", "dev"
    )
    config = load_config(CONFIG_DIR, environment)

    aws_env = cdk.Environment(
        account=os.environ.get("CDK_DEFAULT_ACCOUNT"),
        region=os.environ.get("CDK_DEFAULT_REGION", config.aws.region),
    )

    notifier_stack = NotifierStack(
        app,
        f"CostNotifier-{environment}",
        environment=environment,
        schedule_hours=config.schedule.hours,
        env=aws_env,
    )

    tags = {
        "Project": "slack-aws-cost-notifier",
        "Environment": environment,
        "ManagedBy": "CDK",
    }
    for key, value in tags.items():
        cdk.Tags.of(notifier_stack).add(key, value)

    cdk.CfnOutput(
        notifier_stack,
        "NotifierFunctionArn",
        value=notifier_stack.function_arn,
        description="Cost Notifier Lambda ARN",
    )

    cdk.CfnOutput(
        notifier_stack,
        "ConfigSecretArn",
        value=notifier_stack.config_secret_arn,
        description="Secrets Manager ARN for Slack bot_token and channel_id",
    )

    app.synth()


if __name__ == "__main__":
    main()
