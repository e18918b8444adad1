import numpy as np
import pytest

from tinymlp.core import activations
from tinymlp.core.errors import DimensionMismatchError, InvalidArgumentError
from tinymlp.core.layer import Layer
from tinymlp.core.network import Network
from tinymlp.core.types import NetworkDescription
from tinymlp.core.unit import Unit


def _two_layer_network(activation):
    layer1 = Layer([Unit([-3.1], activation), Unit([4.6], activation)])
    layer2 = Layer([Unit([2.0, 3.0], activation)])
    return Network(1, [layer1, layer2]), layer1, layer2


@pytest.mark.parametrize(
    "low,high,activation",
    [(-1.0, 1.0, None), (-4.0, -2.5, None), (-4.0, -2.5, activations.identity)],
)
def test_generate_structure(low, high, activation):
    dims = [4, 3, 3, 2]
    network = Network.generate(dims, low, high, activation, rng=5)
    assert network.layer_count == len(dims)
    assert network.non_input_layer_count == len(dims) - 1
    assert network.input_dimension == dims[0]
    expected_activation = activation or activations.sigmoid
    for idx, layer in enumerate(network.layers):
        assert layer.dimension == dims[idx + 1]
        assert layer.input_dimension == dims[idx]
        for unit in layer.units:
            assert unit.activation is expected_activation
            assert np.all((unit.weights >= low) & (unit.weights <= high))


def test_evaluate_identity():
    network, _, _ = _two_layer_network(activations.identity)
    output = network.evaluate([10])
    assert np.allclose(output, [10 * -3.1 * 2 + 10 * 4.6 * 3])


def test_evaluate_default_activation():
    network, _, _ = _two_layer_network(None)
    hidden_1 = activations.sigmoid(10 * -3.1)
    hidden_2 = activations.sigmoid(10 * 4.6)
    expected = activations.sigmoid(hidden_1 * 2 + hidden_2 * 3)
    assert np.allclose(network.evaluate([10]), [expected])


def test_evaluate_custom_activation():
    def shift(x):
        return x + 3

    network, _, _ = _two_layer_network(shift)
    hidden_1 = shift(10 * -3.1)
    hidden_2 = shift(10 * 4.6)
    assert np.allclose(network([10]), [shift(hidden_1 * 2 + hidden_2 * 3)])


def test_evaluate_matches_manual_composition():
    network, layer1, layer2 = _two_layer_network(None)
    assert np.allclose(network.evaluate([0.7]), layer2.evaluate(layer1.evaluate([0.7])))


def test_empty_network_returns_input():
    network = Network(3)
    output = network.evaluate([1.0, -2.0, 0.5])
    assert np.array_equal(output, [1.0, -2.0, 0.5])
    assert network.output_dimension == 3
    assert network.layer_count == 1


def test_describe():
    network = Network.generate([4, 3, 2], rng=0)
    description = network.describe()
    assert description == NetworkDescription(layer_dims=[4, 3, 2])
    assert description.input_dimension == 4
    assert description.output_dimension == 2
    assert network.output_dimension == 2


def test_evaluate_wrong_length_raises():
    network = Network.generate([3, 2, 1])
    with pytest.raises(DimensionMismatchError):
        network.evaluate([1.0, 2.0])


@pytest.mark.parametrize("input_dimension", [0, -1])
def test_rejects_non_positive_input_dimension(input_dimension):
    with pytest.raises(InvalidArgumentError):
        Network(input_dimension)


def test_rejects_incompatible_layer_chain():
    with pytest.raises(DimensionMismatchError):
        Network(2, [Layer.generate(3, 2), Layer.generate(1, 4)])


def test_rejects_first_layer_mismatch():
    with pytest.raises(DimensionMismatchError):
        Network(5, [Layer.generate(3, 2)])


def test_generate_rejects_empty_dims():
    with pytest.raises(InvalidArgumentError):
        Network.generate([])


def test_generate_rejects_zero_sized_layer():
    with pytest.raises(InvalidArgumentError):
        Network.generate([3, 0, 2])


def test_generate_single_dimension_has_no_layers():
    network = Network.generate([6])
    assert network.layers == ()
    assert network.input_dimension == 6


@pytest.mark.parametrize("dims", [[3.7, 2.9], [3, 2.0], [2, "1"]])
def test_generate_rejects_non_integral_dims(dims):
    with pytest.raises(InvalidArgumentError):
        Network.generate(dims, rng=0)


def test_rejects_non_integral_input_dimension():
    with pytest.raises(InvalidArgumentError):
        Network(2.5)


def test_generate_rejects_non_finite_bounds():
    with pytest.raises(InvalidArgumentError):
        Network.generate([2, 2], float("nan"), 1.0)
