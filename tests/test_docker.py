"""
Tests for the docker command wrapper.

This module contains tests for layer_maker/common/docker.py.
"""

import subprocess
import unittest
from unittest.mock import patch

from layer_maker.common.docker import DockerClient
from layer_maker.common.exceptions import ImageUnavailable, InstallFailed


class TestDockerClient(unittest.TestCase):
    """Test cases for DockerClient."""

    def setUp(self):
        """Set up test fixtures."""
        self.subprocess_run_patch = patch("layer_maker.common.docker.subprocess.run")
        self.mock_run = self.subprocess_run_patch.start()
        self.client = DockerClient(binary="docker")

    def tearDown(self):
        """Tear down test fixtures."""
        self.subprocess_run_patch.stop()

    def test_pull(self):
        """Test pulling an image."""
        self.client.pull("python:3.12-slim")

        self.mock_run.assert_called_once_with(
            ["docker", "pull", "python:3.12-slim"], check=True
        )

    def test_pull_failure_raises_image_unavailable(self):
        """A non-zero pull is reported as an unavailable image."""
        self.mock_run.side_effect = subprocess.CalledProcessError(1, ["docker", "pull"])

        with self.assertRaises(ImageUnavailable):
            self.client.pull("python:3.12-slim")

    def test_pull_without_docker_raises_image_unavailable(self):
        """A missing docker binary is reported as an unavailable image."""
        self.mock_run.side_effect = FileNotFoundError("docker")

        with self.assertRaises(ImageUnavailable) as ctx:
            self.client.pull("python:3.12-slim")

        self.assertIn("not found", str(ctx.exception))

    def test_run(self):
        """Test running a command with a platform and a volume."""
        self.client.run(
            "python:3.12-slim",
            ["bash", "-c", "echo hi"],
            volumes={"/host/output": "/output"},
            platform="linux/amd64",
        )

        self.mock_run.assert_called_once_with(
            [
                "docker", "run", "--rm",
                "--platform", "linux/amd64",
                "-v", "/host/output:/output",
                "python:3.12-slim",
                "bash", "-c", "echo hi",
            ],
            check=True,
        )

    def test_run_without_options(self):
        """Platform and volumes are optional."""
        cmd = self.client.build_run_command("alpine", ["true"])

        self.assertEqual(cmd, ["docker", "run", "--rm", "alpine", "true"])

    def test_run_failure_raises_install_failed(self):
        """A non-zero container exit is reported as a failed install."""
        self.mock_run.side_effect = subprocess.CalledProcessError(2, ["docker", "run"])

        with self.assertRaises(InstallFailed) as ctx:
            self.client.run("python:3.12-slim", ["false"])

        self.assertIn("exit code 2", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
