"""Random weight sampling shared by every ``generate`` constructor."""

from __future__ import annotations

import math
import threading

import numpy as np

from .errors import InvalidArgumentError
from .types import Array

RngLike = np.random.Generator | int | None

_SHARED_LOCK = threading.Lock()
_SHARED_RNG = np.random.default_rng()


def seed_shared(seed: int | None) -> None:
    """Reseed the process-wide generator used when no ``rng`` is passed."""

    global _SHARED_RNG
    with _SHARED_LOCK:
        _SHARED_RNG = np.random.default_rng(seed)


def resolve_rng(rng: RngLike = None) -> np.random.Generator | None:
    """Return a generator for ``rng``; ``None`` selects the shared generator."""

    if rng is None:
        return None
    if isinstance(rng, np.random.Generator):
        return rng
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        return np.random.default_rng(int(rng))
    raise TypeError(f"rng must be a numpy Generator, an int seed or None, got {type(rng).__name__}")


def check_weight_bounds(min_weight: float, max_weight: float) -> None:
    if not (math.isfinite(min_weight) and math.isfinite(max_weight)):
        raise InvalidArgumentError(
            f"Weight bounds must be finite (min_weight={min_weight}, max_weight={max_weight})"
        )
    if min_weight > max_weight:
        raise InvalidArgumentError(
            f"The minimum weight must not exceed the maximum weight "
            f"(min_weight={min_weight}, max_weight={max_weight})"
        )
    if not math.isfinite(max_weight - min_weight):
        raise InvalidArgumentError(
            f"The weight range is too wide to sample (min_weight={min_weight}, max_weight={max_weight})"
        )


def uniform_weights(
    count: int,
    min_weight: float = -1.0,
    max_weight: float = 1.0,
    rng: RngLike = None,
) -> Array:
    """Draw ``count`` weights uniformly from ``[min_weight, max_weight]``."""

    if count < 1:
        raise InvalidArgumentError(f"The weight count must be at least 1, got {count}")
    check_weight_bounds(min_weight, max_weight)
    generator = resolve_rng(rng)
    if generator is None:
        with _SHARED_LOCK:
            draws = _SHARED_RNG.uniform(min_weight, max_weight, size=count)
    else:
        draws = generator.uniform(min_weight, max_weight, size=count)
    # floating-point rounding in uniform() may overshoot max_weight
    return np.clip(draws.astype(np.float64), min_weight, max_weight)


__all__ = [
    "RngLike",
    "check_weight_bounds",
    "resolve_rng",
    "seed_shared",
    "uniform_weights",
]
