"""Per-thread generator instances.

Generators are not safe to share between threads. Instead of locking a
shared instance, every thread gets a private ``SimpleRandom`` created the
first time that thread asks for one.
"""

import itertools
import threading
from collections.abc import Callable

from simrand.configs.constants import DEFAULT_SEEDS, THREAD_SEED_STRIDE, WORD_MODULUS
from simrand.core.simple_random import SimpleRandom
from simrand.utils.logging_config import LoggerAdapter, get_logger

logger = get_logger(__name__)

SeedFactory = Callable[[int], tuple[int, int]]

__all__ = ["ThreadLocalRegistry", "default_thread_seeds", "thread_local_instance"]


def default_thread_seeds(ordinal: int) -> tuple[int, int]:
    """
    Seed words for the n-th thread to use a registry.

    The first thread receives ``DEFAULT_SEEDS`` unchanged; later threads keep
    the first default word and step the second by a fixed odd stride.

    :param ordinal: Zero-based order in which the thread reached the registry
    :type ordinal: int
    :return: Seed words for that thread's generator
    :rtype: tuple[int, int]
    """
    first, second = DEFAULT_SEEDS
    return first, (second + ordinal * THREAD_SEED_STRIDE) % WORD_MODULUS


class ThreadLocalRegistry:
    """
    Hand out one generator per thread.

    Repeated calls from the same thread return the same instance. Instances
    are released together with their thread.

    :param seed_factory: Maps a thread's ordinal to its seed words
    """

    def __init__(self, seed_factory: SeedFactory = default_thread_seeds) -> None:
        self._seed_factory = seed_factory
        self._local = threading.local()
        self._ordinals = itertools.count()

    def instance(self) -> SimpleRandom:
        """Return the calling thread's generator, creating it on first use."""
        generator = getattr(self._local, "generator", None)
        if generator is None:
            ordinal = next(self._ordinals)
            generator = SimpleRandom(*self._seed_factory(ordinal))
            self._local.generator = generator
            LoggerAdapter(logger, {"thread": threading.current_thread().name}).debug(
                "Created generator #%d with seeds %s", ordinal, tuple(generator.seeds)
            )
        return generator


_registry = ThreadLocalRegistry()


def thread_local_instance() -> SimpleRandom:
    """Return the calling thread's private generator."""
    return _registry.instance()
