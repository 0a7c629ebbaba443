"""Lazily computed Sum statistic for one metric over one time window."""

from __future__ import annotations

from functools import cached_property
from typing import Optional

from .metrics_client import MetricsClient
from .models import Metric, TimeWindow


class MetricStatistics:
    """Sum of a metric over a window; queried once, then cached."""

    def __init__(self, metric: Metric, window: TimeWindow, client: MetricsClient):
        self.metric = metric
        self.window = window
        self.client = client

    @cached_property
    def sum(self) -> Optional[float]:
        """First datapoint's Sum, or None when the query returned no datapoints."""
        datapoints = self.client.get_sum(self.metric, self.window)
        if not datapoints:
            return None
        return datapoints[0].sum
