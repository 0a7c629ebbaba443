"""
Month-to-date billing aggregation.

One Sum per EstimatedCharges metric, keyed by the metric's ServiceName
dimension (or "Total" for the account-wide metric).
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from .constants import (
    BILLING_NAMESPACE,
    CURRENCY_DIMENSION,
    DEFAULT_CURRENCY,
    ESTIMATED_CHARGES_METRIC,
    TOTAL_LABEL,
)
from .metrics_client import MetricsClient
from .models import Dimension, Metric, TimeWindow
from .statistics import MetricStatistics


def month_to_date_window(now: Optional[datetime] = None) -> TimeWindow:
    """Window from the start of the current UTC month to now, truncated to the minute."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    else:
        now = now.astimezone(timezone.utc)

    start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    end = now.replace(second=0, microsecond=0)
    return TimeWindow(start=start, end=end)


def service_label(metric: Metric) -> str:
    return metric.service_name or TOTAL_LABEL


def aggregate(
    metrics: Iterable[Metric], window: TimeWindow, client: MetricsClient
) -> dict[str, float]:
    """
    Map each metric's service label to its Sum over ``window``.

    Metrics without datapoints are skipped. When two metrics share a label the
    later one replaces the earlier value.
    """
    sums: dict[str, float] = {}
    for metric in metrics:
        label = service_label(metric)
        statistics = MetricStatistics(metric=metric, window=window, client=client)
        if statistics.sum is None:
            logging.debug("No datapoints for %s, skipping", label)
            continue
        if label in sums:
            logging.debug("Replacing %s charge %s with %s", label, sums[label], statistics.sum)
        sums[label] = statistics.sum
    return sums


def collect_charges(
    client: MetricsClient,
    now: Optional[datetime] = None,
    currency: str = DEFAULT_CURRENCY,
) -> tuple[TimeWindow, dict[str, float]]:
    """List the EstimatedCharges metrics for ``currency`` and aggregate them month to date."""
    window = month_to_date_window(now)
    metrics = client.list_metrics(
        namespace=BILLING_NAMESPACE,
        metric_name=ESTIMATED_CHARGES_METRIC,
        dimension_filter=[Dimension(CURRENCY_DIMENSION, currency)],
    )
    logging.info(
        "Found %d %s metrics for %s to %s", len(metrics), ESTIMATED_CHARGES_METRIC, window.start, window.end
    )
    return window, aggregate(metrics, window, client)
