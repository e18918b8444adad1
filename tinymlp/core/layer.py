"""A layer of units sharing one input dimension."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .errors import DimensionMismatchError, InconsistentDegreeError, InvalidArgumentError
from .sampling import RngLike, check_weight_bounds, resolve_rng
from .types import Activation, Array, as_size, as_vector
from .unit import Unit

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Layer:
    """Ordered, non-empty collection of units with a common degree."""

    units: Tuple[Unit, ...]

    def __post_init__(self) -> None:
        units = tuple(self.units)
        if len(units) < 1:
            raise InvalidArgumentError("A layer must contain at least one unit")
        for index, unit in enumerate(units):
            if not isinstance(unit, Unit):
                raise InvalidArgumentError(
                    f"Layer element {index} must be a Unit, got {type(unit).__name__}"
                )
        degrees = sorted({unit.degree for unit in units})
        if len(degrees) > 1:
            raise InconsistentDegreeError(f"Inconsistent unit degrees: {degrees}")
        object.__setattr__(self, "units", units)

    @property
    def dimension(self) -> int:
        return len(self.units)

    @property
    def input_dimension(self) -> int:
        return self.units[0].degree

    def evaluate(self, inputs: Sequence[float] | Array) -> Array:
        """Return one output per unit, in unit order."""

        values = as_vector(inputs)
        if values.size != self.input_dimension:
            raise DimensionMismatchError(
                f"The number of input values ({values.size}) must match the layer "
                f"input dimension ({self.input_dimension})"
            )
        return np.array([unit.evaluate(values) for unit in self.units], dtype=np.float64)

    __call__ = evaluate

    @classmethod
    def from_weights(
        cls,
        rows: Sequence[Sequence[float]],
        activation: str | Activation | None = None,
    ) -> "Layer":
        """Build a layer with one unit per weight row."""

        return cls(tuple(Unit(row, activation) for row in rows))

    @classmethod
    def generate(
        cls,
        dimension: int,
        input_dimension: int,
        min_weight: float = -1.0,
        max_weight: float = 1.0,
        activation: str | Activation | None = None,
        *,
        rng: RngLike = None,
    ) -> "Layer":
        """Build ``dimension`` random units of degree ``input_dimension``."""

        dimension = as_size(dimension, "layer dimension")
        input_dimension = as_size(input_dimension, "layer input dimension")
        check_weight_bounds(min_weight, max_weight)
        generator = resolve_rng(rng)
        units = tuple(
            Unit.generate(input_dimension, min_weight, max_weight, activation, rng=generator)
            for _ in range(dimension)
        )
        logger.debug("Generated layer %d -> %d", input_dimension, dimension)
        return cls(units)

    def __repr__(self) -> str:
        return f"Layer(dimension={self.dimension}, input_dimension={self.input_dimension})"


__all__ = ["Layer"]
