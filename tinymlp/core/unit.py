"""Weighted summation unit (a single neuron)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from . import activations
from .errors import DimensionMismatchError, InvalidArgumentError
from .sampling import RngLike, resolve_rng, uniform_weights
from .types import Activation, Array, as_size, as_vector, frozen_vector

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Unit:
    """A neuron holding a weight vector and an activation function.

    ``activation`` accepts a callable, a registered activation name or
    ``None`` for the logistic sigmoid.
    """

    weights: Array
    activation: Activation = field(default=activations.DEFAULT)

    def __post_init__(self) -> None:
        weights = frozen_vector(self.weights)
        if weights.ndim != 1:
            raise InvalidArgumentError(
                f"Unit weights must be a flat sequence, got shape {weights.shape}"
            )
        if weights.size < 1:
            raise InvalidArgumentError("A unit must have at least one weight")
        object.__setattr__(self, "weights", weights)
        object.__setattr__(self, "activation", activations.REGISTRY.resolve(self.activation))

    @property
    def degree(self) -> int:
        return int(self.weights.size)

    def weighted_sum(self, inputs: Sequence[float] | Array) -> float:
        values = as_vector(inputs)
        if values.size != self.degree:
            raise DimensionMismatchError(
                f"The number of input values ({values.size}) must match the unit degree ({self.degree})"
            )
        return float(np.dot(values, self.weights))

    def evaluate(self, inputs: Sequence[float] | Array) -> float:
        """Return ``activation(sum(inputs[i] * weights[i]))``."""

        return float(self.activation(self.weighted_sum(inputs)))

    __call__ = evaluate

    @classmethod
    def generate(
        cls,
        degree: int,
        min_weight: float = -1.0,
        max_weight: float = 1.0,
        activation: str | Activation | None = None,
        *,
        rng: RngLike = None,
    ) -> "Unit":
        """Build a unit whose ``degree`` weights are drawn uniformly at random."""

        degree = as_size(degree, "degree")
        weights = uniform_weights(degree, min_weight, max_weight, resolve_rng(rng))
        logger.debug("Generated unit of degree %d in [%s, %s]", degree, min_weight, max_weight)
        return cls(weights, activation)

    def __repr__(self) -> str:
        name = activations.REGISTRY.name_of(self.activation) or getattr(
            self.activation, "__name__", repr(self.activation)
        )
        return f"Unit(degree={self.degree}, activation={name})"


__all__ = ["Unit"]
