"""
AWS helpers for the publish and upload commands.

Credentials are taken from the environment only: the three variables listed in
REQUIRED_CREDENTIAL_VARS must be set before any client is created.
"""

import logging
import os
from typing import Any, List, Optional

import boto3
from botocore.config import Config

from layer_maker.common.exceptions import MissingCredentials
from layer_maker.config import REQUIRED_CREDENTIAL_VARS

logger = logging.getLogger(__name__)


def check_aws_credentials() -> List[str]:
    """
    Check that the required AWS credential variables are set.

    Returns:
        List[str]: Names of the variables that are unset or empty
    """
    return [name for name in REQUIRED_CREDENTIAL_VARS if not os.environ.get(name)]


def require_aws_credentials() -> None:
    """
    Raise if any required AWS credential variable is missing.

    Raises:
        MissingCredentials: If one or more variables are unset
    """
    missing = check_aws_credentials()
    if missing:
        raise MissingCredentials(missing)


def report_missing_credentials(missing: List[str]) -> None:
    """Log each missing credential variable on its own line."""
    logger.error("Missing required AWS credentials:")
    for name in missing:
        logger.error(f"- {name}")


def _credentials() -> dict:
    return {
        "aws_access_key_id": os.environ.get("AWS_ACCESS_KEY_ID"),
        "aws_secret_access_key": os.environ.get("AWS_SECRET_ACCESS_KEY"),
        "aws_session_token": os.environ.get("AWS_SESSION_TOKEN"),
    }


def create_lambda_client(region_name: Optional[str] = None) -> Any:
    """
    Create and return a Lambda client using the environment credentials.

    Args:
        region_name: AWS region name

    Returns:
        boto3.client: Configured Lambda client
    """
    try:
        return boto3.client("lambda", region_name=region_name, **_credentials())
    except Exception as e:
        logger.error(f"Failed to create Lambda client: {str(e)}")
        raise


def create_s3_client(region_name: Optional[str] = None) -> Any:
    """
    Create and return an S3 client using the environment credentials.

    The client uses virtual-hosted addressing and never the transfer
    acceleration endpoint.

    Args:
        region_name: AWS region name

    Returns:
        boto3.client: Configured S3 client
    """
    config = Config(
        s3={"use_accelerate_endpoint": False, "addressing_style": "virtual"}
    )
    try:
        return boto3.client(
            "s3", region_name=region_name, config=config, **_credentials()
        )
    except Exception as e:
        logger.error(f"Failed to create S3 client: {str(e)}")
        raise
