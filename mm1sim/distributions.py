"""Random variates used for inter-arrival and service times."""

from __future__ import annotations

import math
import random
from enum import Enum

_RESOLUTION = 2**15
_PI = 3.14159
_MIN_DRAW = 1e-10


class Distribution(Enum):
    """Distributions selectable for inter-arrival and service times."""

    UNIFORM = 0
    EXPONENTIAL = 1
    NORMAL = 2

    def parameter_labels(self) -> tuple[str, ...]:
        """Names of the parameters this distribution takes, in order."""
        return {
            Distribution.UNIFORM: ("Start", "End"),
            Distribution.EXPONENTIAL: ("lambda",),
            Distribution.NORMAL: ("mean", "variance"),
        }[self]


def uniform(rng: random.Random, a: float, b: float) -> float:
    """Uniform value on [a, b) with 2**15 steps of resolution."""
    n = rng.randrange(_RESOLUTION)
    return a + (b - a) * n / _RESOLUTION


def exponential(rng: random.Random, rate: float) -> float:
    """Exponential value with the given rate."""
    if rate == 0:
        raise ValueError("exponential rate must be non-zero")
    x = uniform(rng, 0.0, 1.0)
    if x <= _MIN_DRAW:
        x = _MIN_DRAW
    return -math.log(1 - x) / rate


def normal(rng: random.Random, mean: float, scale: float) -> float:
    """Normal value by the Box-Muller transform, scaled by ``scale``."""
    x1 = uniform(rng, 0.0, 1.0)
    x2 = uniform(rng, 0.0, 1.0)
    if x2 <= _MIN_DRAW:
        x2 = _MIN_DRAW
    return mean + scale * math.cos(2 * _PI * x1) * math.sqrt(-2 * math.log(x2))


def draw(
    distribution: Distribution | int,
    p1: float,
    p2: float,
    rng: random.Random,
) -> float:
    """Draw one value from ``distribution`` with parameters ``p1`` and ``p2``."""
    kind = Distribution(distribution)
    if kind is Distribution.UNIFORM:
        return uniform(rng, p1, p2)
    if kind is Distribution.EXPONENTIAL:
        return exponential(rng, p1)
    return normal(rng, p1, p2)