"""Upload a layer archive to S3 so it can be published from there."""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

ZIP_CONTENT_TYPE = "application/zip"


@dataclass(frozen=True)
class UploadPlan:
    """Fully specified parameters of an archive upload."""

    region: str
    bucket: str
    key: str
    layer_file_path: str

    def to_preferences(self) -> Dict[str, str]:
        """Answers to remember for the next run."""
        return {"region": self.region, "bucket": self.bucket, "key": self.key}

    @property
    def location(self) -> str:
        return f"s3://{self.bucket}/{self.key}"


@dataclass
class UploadResult:
    """S3's response to the upload, plus how long it took."""

    plan: UploadPlan
    response: Dict[str, Any]
    duration_seconds: float


def upload_layer(plan: UploadPlan, s3_client: Any) -> UploadResult:
    """
    Upload a layer archive with a single PutObject call.

    Args:
        plan: Archive and destination
        s3_client: boto3 S3 client

    Returns:
        UploadResult: The put_object response and the call duration

    Raises:
        ClientError: If S3 rejects the request
        OSError: If the archive cannot be read
    """
    logger.info("Reading layer file...")
    body = Path(plan.layer_file_path).read_bytes()

    logger.info("Uploading to S3...")
    start_time = time.perf_counter()
    response = s3_client.put_object(
        Bucket=plan.bucket,
        Key=plan.key,
        Body=body,
        ContentType=ZIP_CONTENT_TYPE,
    )
    duration = time.perf_counter() - start_time

    logger.info(f"Uploaded {plan.layer_file_path} to {plan.location}")
    return UploadResult(plan=plan, response=response, duration_seconds=duration)


def format_upload_result(result: UploadResult) -> str:
    """Render the details of an uploaded object for the terminal."""
    response = result.response
    return "\n".join(
        [
            "",
            "Upload completed successfully!",
            "Response details:",
            "----------------",
            f"ETag: {response.get('ETag')}",
            f"Version ID: {response.get('VersionId') or 'Not versioned'}",
            f"Server Side Encryption: {response.get('ServerSideEncryption') or 'None'}",
            f"S3 Location: {result.plan.location}",
            f"Upload duration: {result.duration_seconds:.2f}s",
        ]
    )
