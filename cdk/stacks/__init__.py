"""CDK stacks for Slack AWS Cost Notifier."""

from cdk.stacks.notifier_stack import NotifierStack

__all__ = ["NotifierStack"]
