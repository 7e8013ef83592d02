"""
Cost Notifier Lambda Handler.

This Lambda is triggered by EventBridge on a schedule to:
1. Query AWS Cost Explorer for the account's spend
2. Post a usage summary to Slack
"""

import json
from datetime import UTC, date, datetime
from typing import Any

from slack_aws_cost_notifier.config.loader import get_cached_config
from slack_aws_cost_notifier.errors import CostNotifierError
from slack_aws_cost_notifier.notifier import run_notifier


def _as_bool(value: Any) -> bool:
    """Read a flag that may arrive as a JSON bool or a string."""
    if isinstance(value, bool):
        return value
    return str(value).lower() in ("true", "1", "yes")


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """
    Lambda handler for the cost notification.

    Environment variables:
    - CONFIG_ENV: Environment (dev, staging, prod)
    - CONFIG_SECRET_NAME: Secrets Manager secret with bot_token and channel_id
    - SLACK_API_TOKEN / SLACK_CHANNEL_ID: Override the secret values

    Event parameters (for testing):
    - as_of: str - YYYY-MM-DD end of the query window (defaults to today, UTC)
    - dry_run: bool - Query and format but don't post to Slack

    Failures are re-raised so the invocation is marked as failed; the next
    scheduled run is the only retry.
    """
    print(f"Cost notifier invoked at {datetime.now(UTC).isoformat()}")
    print(f"Event: {json.dumps(event)}")

    as_of = date.fromisoformat(event["as_of"]) if event.get("as_of") else None
    dry_run = _as_bool(event.get("dry_run", False))

    config = get_cached_config()

    try:
        result = run_notifier(config, as_of=as_of, dry_run=dry_run)
    except CostNotifierError as e:
        print(f"Cost notification failed ({e.kind}): {e}")
        raise

    if result.delivered:
        print(f"Message sent successfully {result.response}")

    return {
        "statusCode": 200,
        "body": json.dumps({
            "message": result.message,
            "amount": result.cost.amount,
            "unit": result.cost.unit,
            "start": result.window.start_str,
            "end": result.window.end_str,
            "delivered": result.delivered,
            "ts": result.response.get("ts"),
        }),
    }
