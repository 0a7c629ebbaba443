"""
AWS CloudWatch Billing Package.
Month-to-date estimated charges per service, rendered for a menu-bar shell.
"""

from .aggregation import aggregate, collect_charges, month_to_date_window, service_label
from .cli import main
from .errors import MalformedResponseError, MetricsClientError, MetricsCommandError
from .metrics_client import AwsCliMetricsClient, Boto3MetricsClient, MetricsClient
from .models import Datapoint, Dimension, Metric, TimeWindow
from .plugin_config import PluginConfig, load_plugin_config
from .rendering import render_menu
from .statistics import MetricStatistics

__all__ = [
    "main",
    "aggregate",
    "collect_charges",
    "month_to_date_window",
    "service_label",
    "MetricsClient",
    "AwsCliMetricsClient",
    "Boto3MetricsClient",
    "MetricsClientError",
    "MetricsCommandError",
    "MalformedResponseError",
    "Dimension",
    "Metric",
    "Datapoint",
    "TimeWindow",
    "MetricStatistics",
    "PluginConfig",
    "load_plugin_config",
    "render_menu",
]
