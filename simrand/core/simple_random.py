"""Seedable random number generator with distribution samplers."""

from simrand.configs.constants import DEFAULT_SEEDS
from simrand.core.distributions import DistributionSampler
from simrand.core.generator import CoreGenerator
from simrand.core.seeds import SeedPair

__all__ = ["SimpleRandom"]


class SimpleRandom(DistributionSampler):
    """
    A generator paired with its distribution samplers.

    With no arguments the default seed pair is used. One argument is treated
    like ``set_seeds(value)``; two arguments replace both seed words.

    :param seeds: Nothing, one seed value, or the two seed words
    :raises InvalidSeedArgument: If any seed value is negative

    Example:
        >>> generator = SimpleRandom(1, 2)
        >>> generator.seeds
        SeedPair(first=1, second=2)
    """

    DEFAULT_SEEDS = DEFAULT_SEEDS

    def __init__(self, *seeds: object) -> None:
        if len(seeds) > 2:
            raise TypeError(
                f"SimpleRandom takes at most 2 seed arguments ({len(seeds)} given)"
            )
        generator = CoreGenerator()
        if len(seeds) == 2:
            generator.set_seeds(seeds)
        elif seeds:
            generator.set_seeds(seeds[0])
        super().__init__(generator)

    @property
    def seeds(self) -> SeedPair:
        """The current seed words."""
        return self.generator.seeds

    @seeds.setter
    def seeds(self, value: object) -> None:
        self.generator.set_seeds(value)

    def set_seeds(self, value: object = None) -> SeedPair:
        """Replace the seed words; see ``CoreGenerator.set_seeds``."""
        return self.generator.set_seeds(value)

    set_seed = set_seeds

    def uniform_open01(self) -> float:
        """Return a uniform draw strictly between 0 and 1."""
        return self.generator.uniform_open01()

    def next_uint32(self) -> int:
        return self.generator.next_uint32()

    def __repr__(self) -> str:
        return f"{type(self).__name__}{tuple(self.seeds)}"
