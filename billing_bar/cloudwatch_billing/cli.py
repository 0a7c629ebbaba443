"""
Main entry point for the AWS billing menu-bar plugin.
Prints the menu to stdout; logs and errors go to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys

from billing_bar.common.credential_utils import check_aws_credentials

from .aggregation import collect_charges
from .constants import DEFAULT_CURRENCY, DEFAULT_REGION, DEFAULT_SEARCH_PATH
from .errors import MetricsClientError
from .metrics_client import AwsCliMetricsClient, Boto3MetricsClient
from .plugin_config import load_plugin_config
from .rendering import render_menu


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show month-to-date AWS estimated charges in a menu-bar plugin."
    )
    parser.add_argument(
        "--backend",
        choices=("cli", "api"),
        default="cli",
        help="Query CloudWatch through the aws CLI (default) or boto3.",
    )
    parser.add_argument("--region", default=DEFAULT_REGION, help="CloudWatch region.")
    parser.add_argument("--currency", default=DEFAULT_CURRENCY, help="Currency dimension to filter on.")
    parser.add_argument(
        "--search-path",
        action="append",
        dest="search_path",
        metavar="DIR",
        help="Directory prepended to PATH when locating the aws CLI (repeatable).",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging on stderr.")
    return parser.parse_args(argv)


def build_client(args: argparse.Namespace):
    if args.backend == "api":
        return Boto3MetricsClient(region=args.region)
    search_path = args.search_path if args.search_path else DEFAULT_SEARCH_PATH
    return AwsCliMetricsClient(region=args.region, search_path=search_path)


def main(argv: list[str] | None = None) -> int:
    """Render the billing menu. Returns the process exit status."""
    args = parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
        stream=sys.stderr,
    )

    if args.backend == "api" and not check_aws_credentials():
        return 1

    config = load_plugin_config()
    client = build_client(args)
    try:
        window, sums = collect_charges(client, currency=args.currency)
    except MetricsClientError as exc:
        logging.error("Failed to retrieve billing metrics: %s", exc)
        return 1

    sys.stdout.write(render_menu(window, sums, icon=config.icon))
    return 0


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
