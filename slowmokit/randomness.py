"""Uniform random numbers within inclusive ranges."""

from __future__ import annotations

import random

_default_rng = random.Random()

_RANGE_ERROR = (
    "Start element of range must be less than equal to End element of range."
)


def _is_real(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def random_real(
    low: float, high: float, rng: random.Random | None = None
) -> float:
    """Return a uniformly distributed real number between ``low`` and ``high``."""
    if not (_is_real(low) and _is_real(high)):
        raise TypeError("Both parameter must be floating point only.")
    if low > high:
        raise ValueError(_RANGE_ERROR)
    generator = rng if rng is not None else _default_rng
    return generator.uniform(low, high)


def randint(low: int, high: int, rng: random.Random | None = None) -> int:
    """Return a uniformly distributed integer in ``[low, high]``."""
    if not (_is_integer(low) and _is_integer(high)):
        raise TypeError("Both parameter must be signed or unsigned integer type only.")
    if low > high:
        raise ValueError(_RANGE_ERROR)
    generator = rng if rng is not None else _default_rng
    return generator.randint(low, high)