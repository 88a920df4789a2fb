"""
Layer builders, one per supported runtime.

Use get_runtime() to look up the builder class for a runtime identifier such as
"python3.12amd64".
"""

from typing import Dict, Type

from layer_maker.common.exceptions import UnsupportedRuntime
from layer_maker.runtimes.base import BuildRequest, BuildResult, LayerBuilder
from layer_maker.runtimes.python3_12amd64 import Python312Amd64Builder

RUNTIMES: Dict[str, Type[LayerBuilder]] = {
    Python312Amd64Builder.name: Python312Amd64Builder,
}


def get_runtime(name: str) -> Type[LayerBuilder]:
    """
    Look up the builder class for a runtime.

    Raises:
        UnsupportedRuntime: If no builder is registered under name
    """
    try:
        return RUNTIMES[name]
    except KeyError:
        raise UnsupportedRuntime(name) from None


__all__ = [
    "BuildRequest",
    "BuildResult",
    "LayerBuilder",
    "Python312Amd64Builder",
    "RUNTIMES",
    "get_runtime",
]
