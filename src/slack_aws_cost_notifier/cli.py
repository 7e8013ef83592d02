"""Command-line entry point for a one-off cost notification."""

import argparse
import sys
from datetime import date

from slack_aws_cost_notifier.config.loader import load_config, load_slack_credentials
from slack_aws_cost_notifier.errors import CostNotifierError
from slack_aws_cost_notifier.notifier import run_notifier


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Post the AWS account's usage cost to Slack"
    )
    parser.add_argument(
        "--as-of",
        type=date.fromisoformat,
        default=None,
        help="End of the query window, YYYY-MM-DD (default: today, UTC)",
    )
    parser.add_argument(
        "--env",
        default=None,
        choices=["dev", "staging", "prod"],
        help="Config environment (default: CONFIG_ENV or dev)",
    )
    parser.add_argument(
        "--config-dir",
        default=None,
        help="Directory holding config.yaml (default: search for config/)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Query and format the message without posting it",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(args.config_dir, args.env)
        config = load_slack_credentials(config)
        result = run_notifier(config, as_of=args.as_of, dry_run=args.dry_run)
    except CostNotifierError as e:
        print(f"Error ({e.kind}): {e}", file=sys.stderr)
        return 1

    if result.delivered:
        print(f"Message sent successfully {result.response}")
    else:
        print(result.message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
