import numpy as np
import pytest

from tinymlp.core import activations
from tinymlp.core.errors import (
    DimensionMismatchError,
    InconsistentDegreeError,
    InvalidArgumentError,
)
from tinymlp.core.layer import Layer
from tinymlp.core.unit import Unit


@pytest.mark.parametrize(
    "dimension,input_dimension,low,high",
    [(5, 7, -1.0, 1.0), (3, 12, -10.0, 27.0), (8, 4, 6.0, 7.0)],
)
def test_generate_shapes_and_bounds(dimension, input_dimension, low, high):
    layer = Layer.generate(dimension, input_dimension, low, high, rng=3)
    assert layer.dimension == dimension
    assert len(layer.units) == dimension
    assert layer.input_dimension == input_dimension
    for unit in layer.units:
        assert unit.degree == input_dimension
        assert unit.activation is activations.sigmoid
        assert np.all((unit.weights >= low) & (unit.weights <= high))


def test_generate_units_are_independent():
    layer = Layer.generate(4, 3, rng=0)
    rows = [tuple(unit.weights) for unit in layer.units]
    assert len(set(rows)) == len(rows)


def test_generate_passes_activation():
    layer = Layer.generate(2, 2, activation=activations.identity)
    assert all(unit.activation is activations.identity for unit in layer.units)


def test_constructor_preserves_units():
    units = [Unit.generate(2), Unit.generate(2), Unit.generate(2)]
    layer = Layer(units)
    assert list(layer.units) == units
    assert layer.dimension == 3
    assert layer.input_dimension == 2


def test_evaluate_identity():
    layer = Layer(
        [
            Unit([1.5, -1], activations.identity),
            Unit([3, 6.5], activations.identity),
        ]
    )
    output = layer.evaluate([4, -3.2])
    assert np.allclose(output, [9.2, -8.8])


def test_evaluate_default_activation():
    layer = Layer.from_weights([[1.5, -1], [3, 6.5]])
    expected = [activations.sigmoid(9.2), activations.sigmoid(-8.8)]
    assert np.allclose(layer.evaluate([4, -3.2]), expected)


def test_evaluate_custom_activation():
    def double(x):
        return 2 * x

    layer = Layer.from_weights([[1.5, -1], [3, 6.5]], double)
    assert np.allclose(layer([4, -3.2]), [18.4, -17.6])


def test_empty_layer_rejected():
    with pytest.raises(InvalidArgumentError):
        Layer([])


def test_inconsistent_degrees_rejected():
    with pytest.raises(InconsistentDegreeError):
        Layer([Unit([1.0, 2.0]), Unit([1.0, 2.0, 3.0])])


def test_non_unit_element_rejected():
    with pytest.raises(InvalidArgumentError):
        Layer([Unit([1.0]), None])


def test_generate_rejects_zero_dimension():
    with pytest.raises(InvalidArgumentError):
        Layer.generate(0, 3)


def test_evaluate_wrong_length_raises():
    layer = Layer.generate(2, 3)
    with pytest.raises(DimensionMismatchError):
        layer.evaluate([1.0, 2.0])


@pytest.mark.parametrize("dimension,input_dimension", [(2.5, 3), (2, 3.0), (2, 0)])
def test_generate_rejects_bad_sizes(dimension, input_dimension):
    with pytest.raises(InvalidArgumentError):
        Layer.generate(dimension, input_dimension)
