"""Core uniform generator for simrand.

The generator is Marsaglia's multiply-with-carry pair: two 32-bit words are
each stepped by their own multiplier and carry, then combined into one
32-bit draw. A generator instance must only be driven by one thread at a
time; see ``simrand.core.thread_local`` for per-thread instances.
"""

import math

from simrand.configs.constants import (
    HALF_WORD_BITS,
    HALF_WORD_MASK,
    UNIFORM_SCALE,
    W_MULTIPLIER,
    WORD_MODULUS,
    Z_MULTIPLIER,
)
from simrand.configs.errors import InvalidDistributionParameter
from simrand.core.seeds import DEFAULT_SEED_PAIR, SeedPair, as_seed_input
from simrand.utils.logging_config import get_logger

logger = get_logger(__name__)

__all__ = ["CoreGenerator"]


class CoreGenerator:
    """Deterministic source of uniform draws in the open interval (0, 1).

    Two generators built from the same seeds and driven through the same
    calls produce identical output.

    :param seeds: Optional seed value (see ``set_seeds``); the default seed
        pair is used when omitted
    """

    def __init__(self, seeds: object = DEFAULT_SEED_PAIR) -> None:
        self._w, self._z = DEFAULT_SEED_PAIR
        self._cached_normal: float | None = None
        if seeds is not DEFAULT_SEED_PAIR:
            self.set_seeds(seeds)

    @property
    def seeds(self) -> SeedPair:
        """The current seed words."""
        return SeedPair(self._w, self._z)

    def set_seeds(self, value: object = None) -> SeedPair:
        """Replace the seed words.

        :param value: ``None`` for the current time, an integer for the second
            word only, a pair of integers for both words, a datetime, or a
            seed input from ``simrand.core.seeds``
        :return: The new seed words
        :rtype: SeedPair
        :raises InvalidSeedArgument: If any seed value is negative or unsupported
        """
        seed_input = as_seed_input(value)
        self._w, self._z = seed_input.derive(self.seeds)
        self._cached_normal = None
        logger.debug("Seeds set to (%d, %d) from %r", self._w, self._z, seed_input)
        return self.seeds

    set_seed = set_seeds

    def next_uint32(self) -> int:
        """Advance the state one step and return the combined 32-bit value."""
        self._z = Z_MULTIPLIER * (self._z & HALF_WORD_MASK) + (self._z >> HALF_WORD_BITS)
        self._w = W_MULTIPLIER * (self._w & HALF_WORD_MASK) + (self._w >> HALF_WORD_BITS)
        return ((self._z << HALF_WORD_BITS) + self._w) % WORD_MODULUS

    def uniform_open01(self) -> float:
        """Return a uniform draw strictly between 0 and 1."""
        return (self.next_uint32() + 1) * UNIFORM_SCALE

    def uniform(self, lower: float = 0.0, upper: float = 1.0) -> float:
        """Return a uniform draw from the interval (lower, upper).

        :param lower: Lower bound of the interval
        :param upper: Upper bound of the interval, must exceed ``lower``
        :raises InvalidDistributionParameter: If a bound is not finite or ``upper``
            does not exceed ``lower``
        """
        if not (math.isfinite(lower) and math.isfinite(upper)):
            raise InvalidDistributionParameter(
                f"uniform bounds must be finite, got lower={lower}, upper={upper}"
            )
        if not lower < upper:
            raise InvalidDistributionParameter(
                f"uniform requires lower < upper, got lower={lower}, upper={upper}"
            )
        return lower + self.uniform_open01() * (upper - lower)

    def take_cached_normal(self) -> float | None:
        """Remove and return the spare normal deviate, if one is held."""
        cached, self._cached_normal = self._cached_normal, None
        return cached

    def cache_normal(self, value: float) -> None:
        """Hold a spare normal deviate for the next ``normal`` call."""
        self._cached_normal = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seeds=({self._w}, {self._z}))"
