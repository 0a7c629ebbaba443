"""Shared pytest fixtures for test files."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from botocore.exceptions import ClientError

from billing_bar.cloudwatch_billing.models import TimeWindow
from tests.metrics_test_utils import make_metric


class _StubBotoClient:
    """Minimal stub for boto3 clients used in tests."""

    def __init__(self, service_name: str, **kwargs):
        self.service_name = service_name
        self.region_name = kwargs.get("region_name")
        self.exceptions = ClientError

    def __getattr__(self, name: str):
        def _method(*args, **kwargs):
            del args, kwargs
            return {}

        return _method


@pytest.fixture(autouse=True)
def stub_boto3_client(monkeypatch):
    """Replace boto3.client with a stub so tests don't call real AWS."""

    def fake_client(service_name, **kwargs):
        return _StubBotoClient(service_name, **kwargs)

    monkeypatch.setattr("boto3.client", fake_client)


@pytest.fixture(autouse=True)
def stub_credentials(monkeypatch):
    """Provide fake AWS credentials so create_client doesn't fail."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "stub-key")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "stub-secret")
    monkeypatch.delenv("AWS_SESSION_TOKEN", raising=False)


@pytest.fixture
def march_window():
    """Month-to-date window ending 2024-03-15 10:30 UTC."""
    return TimeWindow(
        start=datetime(2024, 3, 1, tzinfo=timezone.utc),
        end=datetime(2024, 3, 15, 10, 30, tzinfo=timezone.utc),
    )


@pytest.fixture
def ec2_metric():
    return make_metric(ServiceName="AmazonEC2", Currency="USD")


@pytest.fixture
def total_metric():
    return make_metric(Currency="USD")
