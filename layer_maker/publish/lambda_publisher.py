"""
Publish a layer archive as a new Lambda layer version.

The layer content comes either from a local archive, sent inline, or from an
object already staged in S3. Archives over 50 MB have to go through S3.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

SOURCE_LOCAL = "local"
SOURCE_S3 = "s3"


@dataclass(frozen=True)
class PublishPlan:
    """Fully specified parameters of a layer publish."""

    region: str
    layer_name: str
    description: str
    runtime: str
    layer_file_path: Optional[str] = None
    bucket: Optional[str] = None
    key: Optional[str] = None

    def __post_init__(self):
        if self.layer_file_path is None and not (self.bucket and self.key):
            raise ValueError("A layer file path or an S3 bucket and key is required")

    @property
    def source(self) -> str:
        return SOURCE_LOCAL if self.layer_file_path is not None else SOURCE_S3

    def to_preferences(self) -> Dict[str, str]:
        """Answers to remember for the next run."""
        preferences = {
            "region": self.region,
            "layerName": self.layer_name,
            "description": self.description,
            "runtime": self.runtime,
        }
        if self.source == SOURCE_LOCAL:
            preferences["layerFilePath"] = self.layer_file_path
        else:
            preferences["bucket"] = self.bucket
            preferences["key"] = self.key
        return preferences


@dataclass
class PublishResult:
    """Lambda's response to the publish, plus how long it took."""

    response: Dict[str, Any]
    duration_seconds: float


def build_layer_content(plan: PublishPlan) -> Dict[str, Any]:
    """
    Build the Content argument of publish_layer_version.

    Local archives are read into memory before the call is made.
    """
    if plan.source == SOURCE_LOCAL:
        logger.info("Reading local file...")
        return {"ZipFile": Path(plan.layer_file_path).read_bytes()}

    logger.info("Using S3 source...")
    return {"S3Bucket": plan.bucket, "S3Key": plan.key}


def publish_layer(plan: PublishPlan, lambda_client: Any) -> PublishResult:
    """
    Publish a new layer version.

    Args:
        plan: What to publish and where from
        lambda_client: boto3 Lambda client

    Returns:
        PublishResult: The publish_layer_version response and the call duration

    Raises:
        ClientError: If Lambda rejects the request
        OSError: If the local archive cannot be read
    """
    content = build_layer_content(plan)

    logger.info("Publishing layer to AWS...")
    start_time = time.perf_counter()
    response = lambda_client.publish_layer_version(
        LayerName=plan.layer_name,
        Description=plan.description,
        Content=content,
        CompatibleRuntimes=[plan.runtime],
    )
    duration = time.perf_counter() - start_time

    logger.info(f"Published {response.get('LayerVersionArn')}")
    return PublishResult(response=response, duration_seconds=duration)


def format_publish_result(result: PublishResult) -> str:
    """Render the details of a published layer version for the terminal."""
    response = result.response
    lines: List[str] = [
        "",
        "Layer published successfully!",
        "Layer details:",
        "-------------",
        f"Layer Version ARN: {response.get('LayerVersionArn')}",
        f"Layer Version: {response.get('Version')}",
    ]
    if response.get("Description"):
        lines.append(f"Description: {response['Description']}")
    if response.get("CreatedDate"):
        lines.append(f"Created: {response['CreatedDate']}")
    if response.get("CompatibleRuntimes"):
        lines.append(f"Compatible Runtimes: {', '.join(response['CompatibleRuntimes'])}")
    lines.append(f"Upload duration: {result.duration_seconds:.2f}s")
    return "\n".join(lines)
