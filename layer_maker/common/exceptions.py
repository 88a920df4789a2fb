"""Exceptions raised by the layer maker."""

from typing import List


class LayerMakerError(Exception):
    """Base class for all layer maker errors."""


class ManifestNotFound(LayerMakerError):
    """The requirements file does not exist or is not a regular file."""

    def __init__(self, path: str):
        super().__init__(f"Requirements file not found: {path}")
        self.path = path


class UnsupportedRuntime(LayerMakerError):
    """No layer builder is registered for the requested runtime."""

    def __init__(self, runtime: str):
        super().__init__(f"Unsupported runtime: {runtime}")
        self.runtime = runtime


class ImageUnavailable(LayerMakerError):
    """The container image could not be pulled."""


class InstallFailed(LayerMakerError):
    """Dependency installation inside the container exited non-zero."""


class CompressionFailed(LayerMakerError):
    """The layer archive could not be written."""


class MissingCredentials(LayerMakerError):
    """One or more required AWS credential environment variables are unset."""

    def __init__(self, missing: List[str]):
        super().__init__(
            "Missing required AWS credentials: " + ", ".join(missing)
        )
        self.missing = list(missing)
