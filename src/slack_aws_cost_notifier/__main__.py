import sys

from slack_aws_cost_notifier.cli import main

sys.exit(main())
