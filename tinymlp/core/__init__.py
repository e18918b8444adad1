"""Core numerical primitives for tinymlp."""

from . import activations, errors, sampling, types
from .layer import Layer
from .network import Network
from .unit import Unit

__all__ = ["Layer", "Network", "Unit", "activations", "errors", "sampling", "types"]
