"""Tests for the Cost Explorer collector."""

from datetime import date

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from slack_aws_cost_notifier.collectors.aws_cost_explorer import CostExplorerCollector
from slack_aws_cost_notifier.collectors.base import Cost, Granularity
from slack_aws_cost_notifier.collectors.date_window import compute_date_window
from slack_aws_cost_notifier.errors import NoResultBucketError, QueryFailedError


class TestCostExplorerCollector:
    """Tests for CostExplorerCollector."""

    def test_collect(self, ce_client):
        collector = CostExplorerCollector(ce_client=ce_client)

        cost = collector.collect(as_of=date(2024, 3, 15))

        assert cost == Cost(amount=100.0, unit="USD")
        ce_client.get_cost_and_usage.assert_called_once_with(
            TimePeriod={"Start": "2024-03-14", "End": "2024-03-15"},
            Granularity="MONTHLY",
            Metrics=["UnblendedCost"],
        )

    def test_query_overrides(self, ce_client):
        collector = CostExplorerCollector(ce_client=ce_client)
        window = compute_date_window(date(2024, 3, 15))

        collector.query_cost(window, granularity=Granularity.DAILY, metric="BlendedCost")

        kwargs = ce_client.get_cost_and_usage.call_args.kwargs
        assert kwargs["Granularity"] == "DAILY"
        assert kwargs["Metrics"] == ["BlendedCost"]

    def test_granularity_window_policy(self, ce_client):
        collector = CostExplorerCollector(window_policy="granularity", ce_client=ce_client)

        collector.collect(as_of=date(2024, 3, 15))

        kwargs = ce_client.get_cost_and_usage.call_args.kwargs
        assert kwargs["TimePeriod"] == {"Start": "2024-03-01", "End": "2024-03-15"}

    def test_granularity_accepts_token(self, ce_client):
        collector = CostExplorerCollector(granularity="HOURLY", ce_client=ce_client)
        assert collector.granularity is Granularity.HOURLY

    def test_client_error_maps_to_query_failed(self, ce_client):
        error = ClientError(
            {"Error": {"Code": "AccessDeniedException", "Message": "denied"}},
            "GetCostAndUsage",
        )
        ce_client.get_cost_and_usage.side_effect = error
        collector = CostExplorerCollector(ce_client=ce_client)

        with pytest.raises(QueryFailedError, match="AccessDeniedException") as exc_info:
            collector.collect(as_of=date(2024, 3, 15))

        assert exc_info.value.__cause__ is error
        assert exc_info.value.kind == "QueryFailed"

    def test_transport_error_maps_to_query_failed(self, ce_client):
        ce_client.get_cost_and_usage.side_effect = EndpointConnectionError(
            endpoint_url="https://ce.us-east-1.amazonaws.com"
        )
        collector = CostExplorerCollector(ce_client=ce_client)

        with pytest.raises(QueryFailedError) as exc_info:
            collector.collect(as_of=date(2024, 3, 15))

        assert isinstance(exc_info.value.__cause__, EndpointConnectionError)

    def test_empty_report_propagates(self, ce_client):
        ce_client.get_cost_and_usage.return_value = {"ResultsByTime": []}
        collector = CostExplorerCollector(ce_client=ce_client)

        with pytest.raises(NoResultBucketError):
            collector.collect(as_of=date(2024, 3, 15))

    def test_client_created_with_retries(self, monkeypatch):
        created = {}

        def fake_client(service, region_name, config):
            created.update(service=service, region=region_name, config=config)
            return object()

        monkeypatch.setattr(
            "slack_aws_cost_notifier.collectors.aws_cost_explorer.boto3.client", fake_client
        )
        collector = CostExplorerCollector(region="us-east-1", max_attempts=3)

        client = collector.ce_client

        assert collector.ce_client is client
        assert created["service"] == "ce"
        assert created["region"] == "us-east-1"
        assert created["config"].retries == {"max_attempts": 3, "mode": "standard"}
