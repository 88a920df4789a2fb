"""
Lambda layer maker.

Builds AWS Lambda layer archives from a requirements file inside an
architecture-pinned container, and publishes them to Lambda or stages them in S3.
"""

__version__ = "0.1.0"
