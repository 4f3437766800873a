"""
simrand: a seedable pseudo-random number engine with distribution samplers.

The generator is built for simulation and statistics and is not suitable
for cryptographic use.

Example:
    from simrand import SimpleRandom
    generator = SimpleRandom(1, 2)
    generator.gamma(5.0, 2.3)
"""

__version__ = "1.0.0"

from simrand.configs.constants import DEFAULT_SEEDS
from simrand.configs.errors import (
    InvalidDistributionParameter,
    InvalidSeedArgument,
    SimRandomError,
)
from simrand.core import (
    CoreGenerator,
    DistributionSampler,
    SimpleRandom,
    ThreadLocalRegistry,
    thread_local_instance,
)

__all__ = [
    "DEFAULT_SEEDS",
    "SimRandomError",
    "InvalidSeedArgument",
    "InvalidDistributionParameter",
    "CoreGenerator",
    "DistributionSampler",
    "SimpleRandom",
    "ThreadLocalRegistry",
    "thread_local_instance",
]
