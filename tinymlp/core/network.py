"""Feed-forward network composed of layers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence, Tuple

from .errors import DimensionMismatchError, InvalidArgumentError
from .layer import Layer
from .sampling import RngLike, check_weight_bounds, resolve_rng
from .types import Activation, Array, NetworkDescription, as_size, as_vector

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Network:
    """Layers applied in sequence to an input of ``input_dimension`` values.

    The input layer is implicit: ``layers`` only holds the layers that
    transform values. Layer chaining is checked when the network is built, so
    a constructed network only raises :class:`DimensionMismatchError` for
    inputs of the wrong length.
    """

    input_dimension: int
    layers: Tuple[Layer, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "input_dimension", as_size(self.input_dimension, "network input dimension")
        )
        layers = tuple(self.layers)
        expected = self.input_dimension
        for index, layer in enumerate(layers):
            if not isinstance(layer, Layer):
                raise InvalidArgumentError(
                    f"Network element {index} must be a Layer, got {type(layer).__name__}"
                )
            if layer.input_dimension != expected:
                raise DimensionMismatchError(
                    f"Layer {index} expects {layer.input_dimension} inputs but receives {expected}"
                )
            expected = layer.dimension
        object.__setattr__(self, "layers", layers)

    @property
    def non_input_layer_count(self) -> int:
        return len(self.layers)

    @property
    def layer_count(self) -> int:
        """Number of layers including the implicit input layer."""

        return self.non_input_layer_count + 1

    @property
    def output_dimension(self) -> int:
        if not self.layers:
            return self.input_dimension
        return self.layers[-1].dimension

    def describe(self) -> NetworkDescription:
        dims = [self.input_dimension] + [layer.dimension for layer in self.layers]
        return NetworkDescription(layer_dims=dims)

    def evaluate(self, inputs: Sequence[float] | Array) -> Array:
        """Feed ``inputs`` through every layer and return the final vector."""

        values = as_vector(inputs)
        if values.size != self.input_dimension:
            raise DimensionMismatchError(
                f"The number of input values ({values.size}) must match the network "
                f"input dimension ({self.input_dimension})"
            )
        values = values.copy()
        for layer in self.layers:
            values = layer.evaluate(values)
        return values

    __call__ = evaluate

    @classmethod
    def generate(
        cls,
        layer_dims: Sequence[int],
        min_weight: float = -1.0,
        max_weight: float = 1.0,
        activation: str | Activation | None = None,
        *,
        rng: RngLike = None,
    ) -> "Network":
        """Build a network with random weights.

        ``layer_dims[0]`` is the input dimension; every following entry adds
        one layer of that many units.
        """

        dims = [as_size(dim, "layer dimension") for dim in layer_dims]
        if not dims:
            raise InvalidArgumentError("There must be at least one layer dimension")
        check_weight_bounds(min_weight, max_weight)
        generator = resolve_rng(rng)
        layers = tuple(
            Layer.generate(dimension, input_dimension, min_weight, max_weight, activation, rng=generator)
            for input_dimension, dimension in zip(dims[:-1], dims[1:])
        )
        logger.debug("Generated network with layer dims %s", dims)
        return cls(dims[0], layers)

    def __repr__(self) -> str:
        return f"Network(layer_dims={self.describe().layer_dims})"


__all__ = ["Network"]
