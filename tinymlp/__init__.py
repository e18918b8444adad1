"""tinymlp public API."""

from .core import activations  # noqa: F401
from .core import sampling  # noqa: F401
from .core.activations import identity, sigmoid
from .core.errors import (
    DimensionMismatchError,
    InconsistentDegreeError,
    InvalidArgumentError,
    TinyMlpError,
)
from .core.layer import Layer
from .core.network import Network
from .core.types import NetworkDescription
from .core.unit import Unit
from . import presets  # noqa: F401
from .presets import build_network, load_config, load_preset

__version__ = "0.1.0"

__all__ = [
    "DimensionMismatchError",
    "InconsistentDegreeError",
    "InvalidArgumentError",
    "Layer",
    "Network",
    "NetworkDescription",
    "TinyMlpError",
    "Unit",
    "activations",
    "build_network",
    "identity",
    "load_config",
    "load_preset",
    "presets",
    "sampling",
    "sigmoid",
]
