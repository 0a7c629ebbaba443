"""
CloudWatch metrics clients.

Two interchangeable backends answer the two queries the billing plugin needs:
the aws CLI (the default) and boto3.
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import subprocess
from typing import Any, Iterable, Optional, Protocol, Sequence

from botocore.exceptions import BotoCoreError, ClientError

from billing_bar.common.aws_client_factory import create_cloudwatch_client

from .constants import DEFAULT_REGION, DEFAULT_SEARCH_PATH, SUM_STATISTIC
from .errors import MalformedResponseError, MetricsCommandError
from .models import Datapoint, Dimension, Metric, TimeWindow


class MetricsClient(Protocol):
    """The two CloudWatch queries the aggregator depends on."""

    def list_metrics(
        self, namespace: str, metric_name: str, dimension_filter: Sequence[Dimension]
    ) -> list[Metric]: ...

    def get_sum(self, metric: Metric, window: TimeWindow) -> list[Datapoint]: ...


def _parse_metrics(payload: Any) -> list[Metric]:
    raw_metrics = _require_list(payload, "Metrics", "ListMetrics response")
    return [Metric.from_response(item) for item in raw_metrics]


def _parse_datapoints(payload: Any) -> list[Datapoint]:
    raw_datapoints = _require_list(payload, "Datapoints", "GetMetricStatistics response")
    return [Datapoint.from_response(item) for item in raw_datapoints]


def _require_list(payload: Any, field: str, context: str) -> list:
    if not isinstance(payload, dict):
        raise MalformedResponseError(f"{context} must be an object")
    if field not in payload:
        raise MalformedResponseError.missing_field(field, context)
    value = payload[field]
    if not isinstance(value, list):
        raise MalformedResponseError(f"{context} field '{field}' must be a list", field=field)
    return value


def _dimensions_argument(dimensions: Iterable[Dimension]) -> str:
    return json.dumps([dimension.to_request() for dimension in dimensions])


class AwsCliMetricsClient:
    """
    Query CloudWatch by shelling out to ``aws cloudwatch``.

    The search path is prepended to PATH for the child process only, so the
    CLI can be found when the menu-bar shell starts plugins with a minimal
    environment.
    """

    def __init__(
        self,
        region: str = DEFAULT_REGION,
        search_path: Sequence[str] = DEFAULT_SEARCH_PATH,
        executable: str = "aws",
    ):
        self.region = region
        self.search_path = tuple(search_path)
        self.executable = executable

    def _child_path(self) -> str:
        inherited = os.environ.get("PATH", "")
        return os.pathsep.join([*self.search_path, inherited] if inherited else self.search_path)

    def _resolve_executable(self, child_path: str) -> str:
        resolved = shutil.which(self.executable, path=child_path)
        if resolved is None:
            raise MetricsCommandError(
                f"'{self.executable}' executable not found on PATH {child_path}",
                command=[self.executable],
            )
        return resolved

    def _run(self, arguments: list[str]) -> Any:
        child_path = self._child_path()
        command = [self._resolve_executable(child_path), *arguments]
        logging.debug("Running %s", " ".join(command))
        env = dict(os.environ, PATH=child_path)
        try:
            result = subprocess.run(command, capture_output=True, text=True, env=env, check=False)
        except OSError as exc:
            raise MetricsCommandError(f"Failed to run {command[0]}: {exc}", command=command) from exc

        if result.returncode != 0:
            raise MetricsCommandError(
                f"Command '{' '.join(arguments[:2])}' failed",
                command=command,
                returncode=result.returncode,
                stderr=result.stderr,
            )

        logging.debug("Received %d bytes from %s", len(result.stdout), " ".join(arguments[:2]))
        try:
            return json.loads(result.stdout)
        except json.JSONDecodeError as exc:
            raise MalformedResponseError(
                f"Could not parse JSON from '{' '.join(arguments[:2])}': {exc}"
            ) from exc

    def list_metrics(
        self, namespace: str, metric_name: str, dimension_filter: Sequence[Dimension]
    ) -> list[Metric]:
        arguments = [
            "cloudwatch",
            "list-metrics",
            "--namespace",
            namespace,
            "--metric-name",
            metric_name,
            "--dimensions",
            _dimensions_argument(dimension_filter),
            "--region",
            self.region,
        ]
        return _parse_metrics(self._run(arguments))

    def get_sum(self, metric: Metric, window: TimeWindow) -> list[Datapoint]:
        arguments = [
            "cloudwatch",
            "get-metric-statistics",
            "--namespace",
            metric.namespace,
            "--metric-name",
            metric.metric_name,
            "--start-time",
            window.start.isoformat(),
            "--end-time",
            window.end.isoformat(),
            "--period",
            str(window.period),
            "--statistics",
            SUM_STATISTIC,
            "--dimensions",
            _dimensions_argument(metric.dimensions),
            "--region",
            self.region,
        ]
        return _parse_datapoints(self._run(arguments))


class Boto3MetricsClient:
    """Query CloudWatch through boto3 using the toolkit's credential loading."""

    def __init__(self, region: str = DEFAULT_REGION, cloudwatch_client: Optional[Any] = None):
        self.region = region
        self._cloudwatch = cloudwatch_client

    @property
    def cloudwatch(self):
        if self._cloudwatch is None:
            self._cloudwatch = create_cloudwatch_client(self.region)
        return self._cloudwatch

    def list_metrics(
        self, namespace: str, metric_name: str, dimension_filter: Sequence[Dimension]
    ) -> list[Metric]:
        metrics: list[Metric] = []
        try:
            paginator = self.cloudwatch.get_paginator("list_metrics")
            for page in paginator.paginate(
                Namespace=namespace,
                MetricName=metric_name,
                Dimensions=[dimension.to_request() for dimension in dimension_filter],
            ):
                metrics.extend(_parse_metrics(page))
        except (ClientError, BotoCoreError) as exc:
            raise MetricsCommandError(f"CloudWatch ListMetrics failed: {exc}") from exc
        return metrics

    def get_sum(self, metric: Metric, window: TimeWindow) -> list[Datapoint]:
        try:
            response = self.cloudwatch.get_metric_statistics(
                Namespace=metric.namespace,
                MetricName=metric.metric_name,
                Dimensions=metric.dimensions_request(),
                StartTime=window.start,
                EndTime=window.end,
                Period=window.period,
                Statistics=[SUM_STATISTIC],
            )
        except (ClientError, BotoCoreError) as exc:
            raise MetricsCommandError(f"CloudWatch GetMetricStatistics failed: {exc}") from exc
        return _parse_datapoints(response)
