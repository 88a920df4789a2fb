#!/usr/bin/env python
"""
Lambda Layer Publisher

Interactively publishes a layer archive as a new Lambda layer version, either
from a local archive in the output directory or from an object in S3. The
answers are remembered as defaults for the next run.

Usage:
    layer-maker-publish
"""

import argparse
import logging
import sys
from typing import Any, Callable, Dict, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from layer_maker.common.artifacts import list_available_zips
from layer_maker.common.aws_utils import (
    create_lambda_client,
    report_missing_credentials,
    require_aws_credentials,
)
from layer_maker.common.config_store import ConfigStore
from layer_maker.common.exceptions import MissingCredentials
from layer_maker.common.prompts import ask_choice, ask_text
from layer_maker.config import AWS_REGION, COMPATIBLE_RUNTIMES, LOG_FORMAT, LOG_LEVEL
from layer_maker.publish.lambda_publisher import (
    SOURCE_LOCAL,
    SOURCE_S3,
    PublishPlan,
    format_publish_result,
    publish_layer,
)

# Configure logging
logging.basicConfig(level=getattr(logging, LOG_LEVEL), format=LOG_FORMAT)
logger = logging.getLogger(__name__)

SOURCE_LABELS = {"Local file": SOURCE_LOCAL, "S3 bucket": SOURCE_S3}


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="layer-maker-publish",
        description="Publish a layer archive as a new Lambda layer version",
    )
    return parser.parse_args(argv)


def ask_source() -> str:
    label = ask_choice("Select layer source:", list(SOURCE_LABELS))
    return SOURCE_LABELS[label]


def collect_publish_plan(
    source: str, preferences: Dict[str, Any], available_zips: List[str]
) -> PublishPlan:
    """
    Ask for everything needed to publish, defaulting to the stored preferences.

    Args:
        source: SOURCE_LOCAL or SOURCE_S3
        preferences: Answers stored by a previous run
        available_zips: Archives the operator can pick from for a local source

    Returns:
        PublishPlan: The collected answers
    """
    region = ask_text(
        "Enter AWS region", default=preferences.get("region") or AWS_REGION
    )
    layer_name = ask_text(
        "Enter layer name",
        default=preferences.get("layerName"),
        required=True,
        field="Layer name",
    )
    description = ask_text(
        "Enter layer description", default=preferences.get("description")
    )
    runtime = ask_choice(
        "Select runtime:",
        COMPATIBLE_RUNTIMES,
        default=preferences.get("runtime") or COMPATIBLE_RUNTIMES[0],
    )

    if source == SOURCE_LOCAL:
        layer_file_path = ask_choice(
            "Select layer zip file:",
            available_zips,
            default=preferences.get("layerFilePath"),
        )
        return PublishPlan(
            region=region,
            layer_name=layer_name,
            description=description,
            runtime=runtime,
            layer_file_path=layer_file_path,
        )

    bucket = ask_text(
        "Enter S3 bucket name",
        default=preferences.get("bucket"),
        required=True,
        field="Bucket name",
    )
    key = ask_text(
        "Enter S3 object key",
        default=preferences.get("key"),
        required=True,
        field="Object key",
    )
    return PublishPlan(
        region=region,
        layer_name=layer_name,
        description=description,
        runtime=runtime,
        bucket=bucket,
        key=key,
    )


def main(
    argv: Optional[List[str]] = None,
    config_store: Optional[ConfigStore] = None,
    client_factory: Callable[[str], Any] = create_lambda_client,
) -> int:
    """
    Run the interactive publish.

    Args:
        argv: Command line arguments, without the program name
        config_store: Preferences store. If None, uses the default file.
        client_factory: Creates a Lambda client for a region

    Returns:
        int: Exit code (0 for success, 1 for failure)
    """
    parse_arguments(argv)
    logger.info("Starting layer publishing process...")

    try:
        require_aws_credentials()
    except MissingCredentials as e:
        report_missing_credentials(e.missing)
        return 1

    store = config_store or ConfigStore()
    preferences = store.load()
    available_zips = list_available_zips()

    source = ask_source()
    if source == SOURCE_LOCAL and not available_zips:
        logger.error(
            "No zip files available for publishing. Please run the make command first."
        )
        return 1

    plan = collect_publish_plan(source, preferences, available_zips)

    # Save inputs for next time
    store.save(plan.to_preferences())

    try:
        lambda_client = client_factory(plan.region)
        result = publish_layer(plan, lambda_client)
    except (ClientError, BotoCoreError, OSError) as e:
        logger.error(f"Error publishing layer: {str(e)}")
        return 1

    print(format_publish_result(result))
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
