"""Core typing contracts for tinymlp."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable, List, Sequence

import numpy as np

from .errors import DimensionMismatchError, InvalidArgumentError

Array = np.ndarray

Activation = Callable[[float], float]


@dataclass(frozen=True)
class NetworkDescription:
    """Layer sizes of a network, input dimension first."""

    layer_dims: List[int]

    @property
    def input_dimension(self) -> int:
        return self.layer_dims[0]

    @property
    def output_dimension(self) -> int:
        return self.layer_dims[-1]


def as_vector(values: Sequence[float] | Array) -> Array:
    """Return ``values`` as a one-dimensional ``float64`` array."""

    try:
        vector = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise DimensionMismatchError(f"Expected a single numeric input vector: {exc}") from exc
    if vector.ndim != 1:
        raise DimensionMismatchError(
            f"Expected a single input vector, got an array with shape {vector.shape}"
        )
    return vector


def frozen_vector(values: Sequence[float] | Array) -> Array:
    """Copy ``values`` into a read-only vector."""

    try:
        vector = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Weights must be a flat sequence of numbers: {exc}") from exc
    vector.setflags(write=False)
    return vector


def as_size(value: int, name: str) -> int:
    """Return ``value`` as a positive integer size."""

    try:
        size = operator.index(value)
    except TypeError as exc:
        raise InvalidArgumentError(
            f"The {name} must be an integer, got {type(value).__name__} {value!r}"
        ) from exc
    if size < 1:
        raise InvalidArgumentError(f"The {name} must be at least 1, got {size}")
    return size
