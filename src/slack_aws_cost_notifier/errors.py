"""Error types for Slack AWS Cost Notifier.

Every failure is terminal for an invocation. Wrappers around external calls
chain the underlying exception (``raise ... from e``) so the cause stays
available for diagnostics while callers only need the coarse ``kind``.
"""


class CostNotifierError(Exception):
    """Base error for the notifier."""

    kind = "CostNotifierError"


class ConfigMissingError(CostNotifierError):
    """Required token or channel configuration is absent."""

    kind = "ConfigMissing"


class QueryFailedError(CostNotifierError):
    """Cost Explorer call failed at the transport, auth or service level."""

    kind = "QueryFailed"


class CostReportError(CostNotifierError):
    """Cost Explorer response could not be distilled into a cost."""

    kind = "CostReportError"


class NoResultBucketError(CostReportError):
    """Report contains no time buckets."""

    kind = "NoResultBucket"


class MissingTotalsError(CostReportError):
    """First bucket has no totals mapping."""

    kind = "MissingTotals"


class MetricNotFoundError(CostReportError):
    """Requested metric is absent from the totals mapping."""

    kind = "MetricNotFound"

    def __init__(self, metric_name: str):
        super().__init__(f"Metric '{metric_name}' not found in report totals")
        self.metric_name = metric_name


class AmountParseError(CostReportError):
    """Amount is present but not a number."""

    kind = "AmountParseError"

    def __init__(self, amount: str):
        super().__init__(f"Could not parse amount {amount!r} as a number")
        self.amount = amount


class DeliveryFailedError(CostNotifierError):
    """Slack rejected the message or could not be reached."""

    kind = "DeliveryFailed"
