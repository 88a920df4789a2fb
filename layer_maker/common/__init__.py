"""
Common utilities for the layer maker.

This package contains utilities shared by the build, publish and upload commands,
including the preferences store, artifact inventory, size checks, AWS client
helpers and the docker/zip wrappers.
"""
