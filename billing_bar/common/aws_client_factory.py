#!/usr/bin/env python3
"""
AWS Client Factory Module
Provides boto3 client creation for the billing plugin's API backend.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import boto3
from dotenv import load_dotenv

BILLING_METRICS_REGION = "us-east-1"


def _resolve_env_path(env_path: Optional[str] = None) -> str:
    """
    Determine which .env file should be used for AWS credentials.

    Priority order:
      1. Explicit parameter
      2. AWS_ENV_FILE environment variable
      3. ~/.env
    """
    if env_path:
        return env_path
    aws_env_file = os.environ.get("AWS_ENV_FILE")
    if aws_env_file:
        return aws_env_file
    return str(Path.home() / ".env")


def load_credentials_from_env(env_path: Optional[str] = None) -> tuple[str, str]:
    """
    Load AWS credentials from a .env file and return them as a tuple.

    Raises:
        ValueError: If credentials are not found in the .env file
    """
    resolved_path = _resolve_env_path(env_path)
    load_dotenv(resolved_path)

    aws_access_key_id = os.getenv("AWS_ACCESS_KEY_ID")
    aws_secret_access_key = os.getenv("AWS_SECRET_ACCESS_KEY")
    if aws_access_key_id and aws_secret_access_key:
        logging.info("AWS credentials loaded from %s", resolved_path)
        if os.getenv("AWS_SESSION_TOKEN"):
            logging.info("AWS session token loaded from %s", resolved_path)
        return aws_access_key_id, aws_secret_access_key

    raise ValueError(f"AWS credentials not found in {resolved_path}")


def create_client(
    service_name: str,
    region: Optional[str] = None,
    aws_access_key_id: Optional[str] = None,
    aws_secret_access_key: Optional[str] = None,
    aws_session_token: Optional[str] = None,
):
    """
    Create a boto3 client for an AWS service with credentials from the .env file.

    Args:
        service_name: AWS service name (e.g., 'cloudwatch')
        region: AWS region name (optional for global services)
        aws_access_key_id: Optional AWS access key (loads from env if not provided)
        aws_secret_access_key: Optional AWS secret key (loads from env if not provided)
        aws_session_token: Optional session token (read from env if not provided)
    """
    if aws_access_key_id is None or aws_secret_access_key is None:
        aws_access_key_id, aws_secret_access_key = load_credentials_from_env()
    if aws_session_token is None:
        aws_session_token = os.getenv("AWS_SESSION_TOKEN") or None

    client_kwargs = {
        "aws_access_key_id": aws_access_key_id,
        "aws_secret_access_key": aws_secret_access_key,
    }

    if aws_session_token:
        client_kwargs["aws_session_token"] = aws_session_token

    if region is not None:
        client_kwargs["region_name"] = region

    return boto3.client(service_name, **client_kwargs)


def create_cloudwatch_client(
    region: str = BILLING_METRICS_REGION,
    aws_access_key_id: Optional[str] = None,
    aws_secret_access_key: Optional[str] = None,
):
    """Create a CloudWatch boto3 client. Billing metrics only exist in us-east-1."""
    return create_client("cloudwatch", region, aws_access_key_id, aws_secret_access_key)
