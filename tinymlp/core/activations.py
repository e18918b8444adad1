"""Activation functions and the name registry used by configs."""

from __future__ import annotations

import math
from typing import Dict, Iterable

from .types import Activation


def sigmoid(x: float) -> float:
    """Return the logistic sigmoid ``1 / (1 + e^-x)``."""

    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    # e^x stays finite for very negative x
    z = math.exp(x)
    return z / (1.0 + z)


def identity(x: float) -> float:
    """Return ``x`` unchanged."""

    return x


def relu(x: float) -> float:
    return max(x, 0.0)


def tanh(x: float) -> float:
    return math.tanh(x)


DEFAULT = sigmoid


class ActivationRegistry:
    """Central registry mapping names to activation functions."""

    def __init__(self) -> None:
        self._registry: Dict[str, Activation] = {}

    def register(self, name: str, fn: Activation) -> None:
        self._registry[name] = fn

    def get(self, name: str) -> Activation:
        if name not in self._registry:
            available = ", ".join(self.names())
            raise KeyError(f"Unknown activation {name!r}. Available activations: {available}")
        return self._registry[name]

    def names(self) -> Iterable[str]:
        return sorted(self._registry)

    def name_of(self, fn: Activation) -> str | None:
        for name, registered in self._registry.items():
            if registered is fn:
                return name
        return None

    def resolve(self, value: str | Activation | None) -> Activation:
        if value is None:
            return DEFAULT
        if isinstance(value, str):
            return self.get(value)
        if callable(value):
            return value
        raise TypeError(f"Activation must be a name or a callable, got {type(value).__name__}")


REGISTRY = ActivationRegistry()
REGISTRY.register("sigmoid", sigmoid)
REGISTRY.register("identity", identity)
REGISTRY.register("relu", relu)
REGISTRY.register("tanh", tanh)
# Alias for parity with the usual "logistic" naming
REGISTRY.register("logistic", sigmoid)

__all__ = [
    "ActivationRegistry",
    "DEFAULT",
    "REGISTRY",
    "identity",
    "relu",
    "sigmoid",
    "tanh",
]
