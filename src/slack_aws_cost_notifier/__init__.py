"""
Slack AWS Cost Notifier - scheduled AWS spend summaries posted to Slack.

A small scheduled job that:
- Queries AWS Cost Explorer for the account's spend over a query window
- Distils the first result bucket into a single amount and currency
- Posts a one-line usage summary to a Slack channel
"""

__version__ = "0.1.0"
