"""
Tests for publishing layer versions.

This module contains tests for layer_maker/publish/lambda_publisher.py.
"""

import unittest
from datetime import datetime
from unittest.mock import MagicMock

from botocore.exceptions import ClientError

from layer_maker.publish.lambda_publisher import (
    PublishPlan,
    PublishResult,
    format_publish_result,
    publish_layer,
)

RESPONSE = {
    "LayerVersionArn": "arn:aws:lambda:us-west-2:123456789012:layer:deps:3",
    "Version": 3,
    "Description": "shared deps",
    "CreatedDate": "2024-05-01T10:20:30.123+0000",
    "CompatibleRuntimes": ["python3.12"],
}


class TestPublishPlan(unittest.TestCase):
    """Test cases for PublishPlan."""

    def test_local_source_preferences(self):
        """Local plans remember the archive path, not the bucket."""
        plan = PublishPlan(
            region="us-west-2",
            layer_name="deps",
            description="shared deps",
            runtime="python3.12",
            layer_file_path="/work/output/layer.zip",
        )

        self.assertEqual(plan.source, "local")
        self.assertEqual(
            plan.to_preferences(),
            {
                "region": "us-west-2",
                "layerName": "deps",
                "description": "shared deps",
                "runtime": "python3.12",
                "layerFilePath": "/work/output/layer.zip",
            },
        )

    def test_s3_source_preferences(self):
        """S3 plans remember the bucket and key."""
        plan = PublishPlan(
            region="eu-west-1",
            layer_name="deps",
            description="",
            runtime="python3.12",
            bucket="layers",
            key="deps/layer.zip",
        )

        self.assertEqual(plan.source, "s3")
        prefs = plan.to_preferences()
        self.assertEqual(prefs["bucket"], "layers")
        self.assertEqual(prefs["key"], "deps/layer.zip")
        self.assertNotIn("layerFilePath", prefs)

    def test_plan_needs_a_source(self):
        """A plan without archive or bucket/key is rejected."""
        with self.assertRaises(ValueError):
            PublishPlan(
                region="us-west-2",
                layer_name="deps",
                description="",
                runtime="python3.12",
                bucket="layers",
            )


class TestPublishLayer(unittest.TestCase):
    """Test cases for publish_layer."""

    def setUp(self):
        """Set up test fixtures."""
        self.mock_lambda_client = MagicMock()
        self.mock_lambda_client.publish_layer_version.return_value = RESPONSE

    def test_publish_from_local_file(self):
        """The archive bytes are sent inline."""
        import tempfile

        with tempfile.NamedTemporaryFile(suffix=".zip") as f:
            f.write(b"PK\x03\x04layer")
            f.flush()
            plan = PublishPlan(
                region="us-west-2",
                layer_name="deps",
                description="shared deps",
                runtime="python3.12",
                layer_file_path=f.name,
            )
            result = publish_layer(plan, self.mock_lambda_client)

        self.mock_lambda_client.publish_layer_version.assert_called_once_with(
            LayerName="deps",
            Description="shared deps",
            Content={"ZipFile": b"PK\x03\x04layer"},
            CompatibleRuntimes=["python3.12"],
        )
        self.assertEqual(result.response, RESPONSE)
        self.assertGreaterEqual(result.duration_seconds, 0)

    def test_publish_from_s3(self):
        """S3 sources are passed by reference."""
        plan = PublishPlan(
            region="us-west-2",
            layer_name="deps",
            description="",
            runtime="python3.12",
            bucket="layers",
            key="deps/layer.zip",
        )

        publish_layer(plan, self.mock_lambda_client)

        call_args = self.mock_lambda_client.publish_layer_version.call_args[1]
        self.assertEqual(
            call_args["Content"], {"S3Bucket": "layers", "S3Key": "deps/layer.zip"}
        )

    def test_publish_error_propagates(self):
        """Service errors are not caught here."""
        self.mock_lambda_client.publish_layer_version.side_effect = ClientError(
            {"Error": {"Code": "AccessDeniedException", "Message": "denied"}},
            "PublishLayerVersion",
        )
        plan = PublishPlan(
            region="us-west-2",
            layer_name="deps",
            description="",
            runtime="python3.12",
            bucket="layers",
            key="layer.zip",
        )

        with self.assertRaises(ClientError):
            publish_layer(plan, self.mock_lambda_client)


class TestFormatPublishResult(unittest.TestCase):
    """Test cases for format_publish_result."""

    def test_full_response(self):
        """All details are rendered."""
        text = format_publish_result(PublishResult(RESPONSE, 1.234))

        self.assertIn("Layer published successfully!", text)
        self.assertIn(f"Layer Version ARN: {RESPONSE['LayerVersionArn']}", text)
        self.assertIn("Layer Version: 3", text)
        self.assertIn("Description: shared deps", text)
        self.assertIn("Created: 2024-05-01T10:20:30.123+0000", text)
        self.assertIn("Compatible Runtimes: python3.12", text)
        self.assertIn("Upload duration: 1.23s", text)

    def test_optional_fields_omitted(self):
        """Missing optional fields are left out."""
        response = {"LayerVersionArn": "arn", "Version": 1, "Description": ""}

        text = format_publish_result(PublishResult(response, 0.5))

        self.assertNotIn("Description:", text)
        self.assertNotIn("Created:", text)
        self.assertNotIn("Compatible Runtimes:", text)

    def test_created_date_object(self):
        """Datetime values are rendered as-is."""
        response = dict(RESPONSE, CreatedDate=datetime(2024, 5, 1, 10, 20, 30))

        text = format_publish_result(PublishResult(response, 0.0))

        self.assertIn("Created: 2024-05-01 10:20:30", text)


if __name__ == "__main__":
    unittest.main()
