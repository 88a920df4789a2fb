#!/usr/bin/env python
"""
Lambda Layer Maker

Builds a Lambda layer archive from a requirements file and checks its size.

Usage:
    layer-maker-build -f requirements.txt [--runtime python3.12amd64] [--content-hash]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from layer_maker.common.exceptions import LayerMakerError, UnsupportedRuntime
from layer_maker.common.layer_size import check_layer_size
from layer_maker.config import DEFAULT_RUNTIME, LOG_FORMAT, LOG_LEVEL
from layer_maker.runtimes import LayerBuilder, get_runtime

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
        prog="layer-maker-build", description="Lambda Layer Maker"
    )
    parser.add_argument(
        "-r",
        "--runtime",
        type=str,
        default=DEFAULT_RUNTIME,
        help=f"Runtime to create layer for (default: {DEFAULT_RUNTIME})",
    )
    parser.add_argument(
        "-f",
        "--requirements",
        type=str,
        help="Path to requirements.txt file (for Python runtime)",
    )
    parser.add_argument(
        "--content-hash",
        action="store_true",
        help="Append a digest of the requirements file to the archive name",
    )

    return parser.parse_args(argv)


def main(
    argv: Optional[List[str]] = None,
    builder_factory: Optional[Callable[..., LayerBuilder]] = None,
) -> int:
    """
    Build a layer and report its size.

    Args:
        argv: Command line arguments, without the program name
        builder_factory: Called with no arguments to create the builder. If None,
            the builder registered for --runtime is used. Builders write to
            the shared OUTPUT_DIR so the publish and upload commands find the
            archive.

    Returns:
        int: Exit code (0 for success, 1 for failure)
    """
    args = parse_arguments(argv)

    if args.requirements and not Path(args.requirements).is_file():
        logger.error(f"Requirements file not found: {args.requirements}")
        return 1

    try:
        builder_cls = get_runtime(args.runtime)
    except UnsupportedRuntime as e:
        logger.error(str(e))
        return 1

    if builder_cls.requires_manifest and not args.requirements:
        logger.error("Requirements file is required for Python runtime")
        return 1

    builder = (builder_factory or builder_cls)()

    try:
        result = builder.create_layer(
            args.requirements, with_content_hash=args.content_hash
        )
    except (LayerMakerError, OSError) as e:
        logger.error(f"Error: {str(e)}")
        return 1

    check_layer_size(result.archive_path)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
