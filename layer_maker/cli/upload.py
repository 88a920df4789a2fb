#!/usr/bin/env python
"""
Lambda Layer S3 Uploader

Interactively uploads a layer archive from the output directory to S3, for
archives too large to publish to Lambda directly. The answers are remembered as
defaults for the next run.

Usage:
    layer-maker-upload
"""

import argparse
import logging
import os
import sys
from typing import Any, Callable, Dict, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from layer_maker.common.artifacts import list_available_zips
from layer_maker.common.aws_utils import (
    create_s3_client,
    report_missing_credentials,
    require_aws_credentials,
)
from layer_maker.common.config_store import ConfigStore
from layer_maker.common.exceptions import MissingCredentials
from layer_maker.common.prompts import ask_choice, ask_text
from layer_maker.config import AWS_REGION, LOG_FORMAT, LOG_LEVEL
from layer_maker.publish.s3_uploader import (
    UploadPlan,
    format_upload_result,
    upload_layer,
)

# Configure logging
logging.basicConfig(level=getattr(logging, LOG_LEVEL), format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="layer-maker-upload", description="Lambda Layer S3 Uploader"
    )
    return parser.parse_args(argv)


def collect_upload_plan(
    preferences: Dict[str, Any], available_zips: List[str]
) -> UploadPlan:
    """Ask for the upload destination and archive; the key defaults to the archive's name."""
    region = ask_text(
        "Enter AWS region", default=preferences.get("region") or AWS_REGION
    )
    bucket = ask_text(
        "Enter S3 bucket name",
        default=preferences.get("bucket"),
        required=True,
        field="Bucket name",
    )
    layer_file_path = ask_choice("Select layer zip file:", available_zips)
    key = ask_text(
        "Enter S3 object key (path/name in bucket)",
        default=os.path.basename(layer_file_path),
        required=True,
        field="Object key",
    )
    return UploadPlan(
        region=region, bucket=bucket, key=key, layer_file_path=layer_file_path
    )


def main(
    argv: Optional[List[str]] = None,
    config_store: Optional[ConfigStore] = None,
    client_factory: Callable[[str], Any] = create_s3_client,
) -> int:
    """
    Run the interactive upload.

    Args:
        argv: Command line arguments, without the program name
        config_store: Preferences store. If None, uses the default file.
        client_factory: Creates an S3 client for a region

    Returns:
        int: Exit code (0 for success, 1 for failure)
    """
    parse_arguments(argv)
    logger.info("Starting S3 upload process...")

    try:
        require_aws_credentials()
    except MissingCredentials as e:
        report_missing_credentials(e.missing)
        return 1

    store = config_store or ConfigStore()
    preferences = store.load()

    available_zips = list_available_zips()
    if not available_zips:
        logger.error(
            "No zip files available for upload. Please run the make command first."
        )
        return 1

    plan = collect_upload_plan(preferences, available_zips)

    # Save inputs for next time
    store.save(plan.to_preferences())

    try:
        s3_client = client_factory(plan.region)
        result = upload_layer(plan, s3_client)
    except (ClientError, BotoCoreError, OSError) as e:
        logger.error(f"Error uploading to S3: {str(e)}")
        return 1

    print(format_upload_result(result))
    return 0


def run() -> None:
    try:
        exit_code = main()
    except KeyboardInterrupt:
        logger.error("Aborted")
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    run()
