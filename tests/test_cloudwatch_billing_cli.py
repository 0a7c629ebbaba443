"""Tests for billing_bar/cloudwatch_billing/cli.py"""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import patch

from billing_bar.cloudwatch_billing.cli import build_client, main, parse_args
from billing_bar.cloudwatch_billing.errors import MalformedResponseError, MetricsCommandError
from billing_bar.cloudwatch_billing.metrics_client import AwsCliMetricsClient, Boto3MetricsClient
from billing_bar.cloudwatch_billing.models import TimeWindow
from billing_bar.cloudwatch_billing.plugin_config import PluginConfig
from tests.assertions import assert_equal

MOD = "billing_bar.cloudwatch_billing.cli"

WINDOW = TimeWindow(
    start=datetime(2024, 3, 1, tzinfo=timezone.utc),
    end=datetime(2024, 3, 15, 10, 30, tzinfo=timezone.utc),
)


class TestParseArgs:
    """Tests for parse_args."""

    def test_defaults(self):
        """No arguments are required."""
        args = parse_args([])

        assert_equal(args.backend, "cli")
        assert_equal(args.region, "us-east-1")
        assert_equal(args.currency, "USD")
        assert args.search_path is None
        assert args.verbose is False

    def test_repeatable_search_path(self):
        """--search-path may be given several times."""
        args = parse_args(["--search-path", "/opt/homebrew/bin", "--search-path", "/usr/local/bin"])

        assert_equal(args.search_path, ["/opt/homebrew/bin", "/usr/local/bin"])


class TestBuildClient:
    """Tests for build_client."""

    def test_cli_backend_uses_default_search_path(self):
        """The CLI backend searches /usr/local/bin by default."""
        client = build_client(parse_args([]))

        assert isinstance(client, AwsCliMetricsClient)
        assert_equal(client.search_path, ("/usr/local/bin",))
        assert_equal(client.region, "us-east-1")

    def test_cli_backend_custom_search_path(self):
        """Explicit search paths replace the default."""
        client = build_client(parse_args(["--search-path", "/opt/bin", "--region", "us-west-2"]))

        assert_equal(client.search_path, ("/opt/bin",))
        assert_equal(client.region, "us-west-2")

    def test_api_backend(self):
        """--backend api selects boto3."""
        client = build_client(parse_args(["--backend", "api"]))

        assert isinstance(client, Boto3MetricsClient)


class TestMain:
    """Tests for main."""

    @patch(f"{MOD}.load_plugin_config")
    @patch(f"{MOD}.collect_charges")
    def test_prints_menu(self, mock_collect, mock_config, capsys):
        """The rendered menu goes to stdout and the exit status is 0."""
        mock_config.return_value = PluginConfig(icon="ICON")
        mock_collect.return_value = (WINDOW, {"EC2": 12.5, "Total": 40.0})

        result = main([])

        assert_equal(result, 0)
        captured = capsys.readouterr()
        assert captured.out.startswith("$40.0 | image=ICON\n---\n2024-03-01 ~ 2024-03-15")
        assert "EC2                $12.5" in captured.out
        client = mock_collect.call_args.args[0]
        assert isinstance(client, AwsCliMetricsClient)
        assert_equal(mock_collect.call_args.kwargs, {"currency": "USD"})

    @patch(f"{MOD}.load_plugin_config")
    @patch(f"{MOD}.collect_charges")
    def test_command_failure_exits_non_zero(self, mock_collect, mock_config, capsys, caplog):
        """Backend failures print nothing to stdout and exit with status 1."""
        mock_config.return_value = PluginConfig(icon="ICON")
        mock_collect.side_effect = MetricsCommandError("Command 'cloudwatch list-metrics' failed", returncode=255)

        result = main([])

        assert_equal(result, 1)
        assert_equal(capsys.readouterr().out, "")
        assert "Failed to retrieve billing metrics" in caplog.text

    @patch(f"{MOD}.load_plugin_config")
    @patch(f"{MOD}.collect_charges")
    def test_malformed_response_exits_non_zero(self, mock_collect, mock_config, capsys):
        """Schema failures are fatal too."""
        mock_config.return_value = PluginConfig()
        mock_collect.side_effect = MalformedResponseError("Datapoint is missing required field 'Sum'")

        assert_equal(main([]), 1)
        assert_equal(capsys.readouterr().out, "")

    @patch(f"{MOD}.collect_charges")
    @patch(f"{MOD}.check_aws_credentials")
    def test_api_backend_without_credentials(self, mock_check, mock_collect):
        """The boto3 backend stops early when no credentials are configured."""
        mock_check.return_value = False

        assert_equal(main(["--backend", "api"]), 1)
        mock_collect.assert_not_called()

    @patch(f"{MOD}.load_plugin_config")
    @patch(f"{MOD}.collect_charges")
    @patch(f"{MOD}.check_aws_credentials")
    def test_cli_backend_skips_credential_check(self, mock_check, mock_collect, mock_config):
        """The aws CLI resolves its own credentials."""
        mock_config.return_value = PluginConfig()
        mock_collect.return_value = (WINDOW, {})

        assert_equal(main([]), 0)
        mock_check.assert_not_called()
