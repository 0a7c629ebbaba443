"""
Shared AWS credential checks.

The aws CLI backend resolves credentials on its own; the boto3 backend reads
them from the same .env file the client factory uses.
"""

import sys

from billing_bar.common.aws_client_factory import (
    _resolve_env_path,
    load_credentials_from_env,
)


def check_aws_credentials(env_path=None):
    """
    Check if AWS credentials can be loaded from the .env file.

    Hints go to stderr because stdout belongs to the menu-bar shell.

    Returns:
        bool: True if credentials found, False otherwise
    """
    try:
        load_credentials_from_env(env_path)
    except ValueError:
        resolved_path = _resolve_env_path(env_path)
        print(f"AWS credentials not found in {resolved_path}.", file=sys.stderr)
        print(f"Please ensure {resolved_path} contains:", file=sys.stderr)
        print("  AWS_ACCESS_KEY_ID=your-access-key", file=sys.stderr)
        print("  AWS_SECRET_ACCESS_KEY=your-secret-key", file=sys.stderr)
        return False
    return True
