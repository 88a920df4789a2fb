"""
Command line entry points.

- make: build a layer archive from a requirements file
- publish: publish an archive as a new Lambda layer version
- upload: upload an archive to S3
"""
