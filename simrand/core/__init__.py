"""Seed handling, the uniform generator and distribution samplers."""

from simrand.core.distributions import DISTRIBUTIONS, DistributionSampler
from simrand.core.generator import CoreGenerator
from simrand.core.seeds import (
    CurrentTimeSeed,
    IntegerSeed,
    PairSeed,
    SeedInput,
    SeedPair,
    TimestampSeed,
)
from simrand.core.simple_random import SimpleRandom
from simrand.core.thread_local import ThreadLocalRegistry, thread_local_instance

__all__ = [
    "CoreGenerator",
    "DistributionSampler",
    "DISTRIBUTIONS",
    "SimpleRandom",
    "ThreadLocalRegistry",
    "thread_local_instance",
    "SeedPair",
    "SeedInput",
    "CurrentTimeSeed",
    "IntegerSeed",
    "PairSeed",
    "TimestampSeed",
]
