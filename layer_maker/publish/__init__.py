"""
Publishing of built layer archives.

- lambda_publisher: registers an archive as a new Lambda layer version
- s3_uploader: stages an archive in an S3 bucket
"""
