"""Seed handling for the simrand generator.

A generator is driven by two unsigned 32-bit words. Callers describe how
those words should change with one of four seed inputs:

* ``CurrentTimeSeed`` derives both words from the wall clock.
* ``IntegerSeed`` replaces only the second word.
* ``PairSeed`` replaces both words.
* ``TimestampSeed`` derives both words from a fixed point in time.

Each input knows how to turn the current pair into the next one, so the
generator never has to inspect what kind of seed it was handed.
"""

import numbers
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import NamedTuple, Union

from simrand.configs.constants import (
    DEFAULT_SEEDS,
    HALF_WORD_BITS,
    HALF_WORD_MASK,
    W_MULTIPLIER,
    WORD_MODULUS,
    Z_MULTIPLIER,
)
from simrand.configs.errors import InvalidSeedArgument

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MICROSECOND = timedelta(microseconds=1)

__all__ = [
    "SeedPair",
    "CurrentTimeSeed",
    "IntegerSeed",
    "PairSeed",
    "TimestampSeed",
    "SeedInput",
    "DEFAULT_SEED_PAIR",
    "as_seed_input",
    "current_time",
    "timestamp_to_seed_pair",
]


class SeedPair(NamedTuple):
    """The two 32-bit seed words (w, z) of a generator."""

    first: int
    second: int


DEFAULT_SEED_PAIR = SeedPair(*DEFAULT_SEEDS)


def _to_word(value: object, name: str) -> int:
    """Validate a seed value and reduce it to an unsigned 32-bit word.

    :param value: Candidate seed value
    :param name: Argument name used in error messages
    :return: The value modulo 2**32
    :raises InvalidSeedArgument: If the value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidSeedArgument(
            f"{name} must be a non-negative integer, got {value!r}"
        )
    if value < 0:
        raise InvalidSeedArgument(f"{name} must be non-negative, got {value}")
    return int(value) % WORD_MODULUS


def _is_stuck(word: int, multiplier: int) -> bool:
    """Whether one multiply-with-carry step puts ``word`` on a fixed point.

    Each word has two fixed points, 0 and ``multiplier * 2**16 - 1``. A word
    that reaches either one repeats it forever.
    """
    stepped = multiplier * (word & HALF_WORD_MASK) + (word >> HALF_WORD_BITS)
    return stepped in (0, multiplier * (HALF_WORD_MASK + 1) - 1)


def _replace_word(new_word: int, prior_word: int, multiplier: int) -> int:
    # Seeds that would pin a word in place keep the prior word instead.
    return prior_word if _is_stuck(new_word, multiplier) else new_word


def current_time() -> datetime:
    """Return the current time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


def timestamp_to_seed_pair(moment: datetime) -> SeedPair:
    """Derive a seed pair from a point in time.

    The timestamp is converted to whole microseconds since the Unix epoch.
    The first word is that count shifted right by 16 bits and the second
    word is the count itself, both reduced modulo 2**32. Naive datetimes are
    interpreted in the local timezone.

    :param moment: The timestamp to convert
    :type moment: datetime
    :return: The derived seed words (either may be zero)
    :rtype: SeedPair
    :raises InvalidSeedArgument: If the timestamp precedes the epoch

    Example:
        >>> timestamp_to_seed_pair(datetime(2015, 1, 1, tzinfo=timezone(timedelta(hours=-5))))
        SeedPair(first=193992865, second=413250560)
    """
    if not isinstance(moment, datetime):
        raise InvalidSeedArgument(f"Timestamp seed must be a datetime, got {moment!r}")
    if moment.tzinfo is None:
        moment = moment.astimezone()

    microseconds = (moment - EPOCH) // _ONE_MICROSECOND
    if microseconds < 0:
        raise InvalidSeedArgument(f"Timestamp seed must not precede the epoch, got {moment}")

    return SeedPair(
        (microseconds >> HALF_WORD_BITS) % WORD_MODULUS,
        microseconds % WORD_MODULUS,
    )


@dataclass(frozen=True)
class CurrentTimeSeed:
    """Seed both words from the wall clock at the moment of assignment."""

    def derive(self, current: SeedPair) -> SeedPair:
        return TimestampSeed(current_time()).derive(current)


@dataclass(frozen=True)
class IntegerSeed:
    """Replace the second seed word, keeping the first."""

    value: int

    def __post_init__(self) -> None:
        _to_word(self.value, "seed")

    def derive(self, current: SeedPair) -> SeedPair:
        return SeedPair(
            current.first,
            _replace_word(_to_word(self.value, "seed"), current.second, Z_MULTIPLIER),
        )


@dataclass(frozen=True)
class PairSeed:
    """Replace both seed words."""

    first: int
    second: int

    def __post_init__(self) -> None:
        _to_word(self.first, "first seed")
        _to_word(self.second, "second seed")

    def derive(self, current: SeedPair) -> SeedPair:
        return SeedPair(
            _replace_word(_to_word(self.first, "first seed"), current.first, W_MULTIPLIER),
            _replace_word(_to_word(self.second, "second seed"), current.second, Z_MULTIPLIER),
        )


@dataclass(frozen=True)
class TimestampSeed:
    """Seed both words from a fixed timestamp."""

    moment: datetime

    def __post_init__(self) -> None:
        timestamp_to_seed_pair(self.moment)

    def derive(self, current: SeedPair) -> SeedPair:
        derived = timestamp_to_seed_pair(self.moment)
        return SeedPair(
            _replace_word(derived.first, current.first, W_MULTIPLIER),
            _replace_word(derived.second, current.second, Z_MULTIPLIER),
        )


SeedInput = Union[CurrentTimeSeed, IntegerSeed, PairSeed, TimestampSeed]

_SEED_INPUT_TYPES = (CurrentTimeSeed, IntegerSeed, PairSeed, TimestampSeed)


def as_seed_input(value: object = None) -> SeedInput:
    """Convert a plain Python value into a seed input.

    ``None`` selects the wall clock, an integer replaces the second word, a
    two-element tuple or list replaces both words and a datetime selects a
    timestamp. Seed inputs are returned unchanged.

    :param value: The raw seed value
    :return: The matching seed input
    :raises InvalidSeedArgument: If the value is negative or of an unsupported type
    """
    if value is None:
        return CurrentTimeSeed()
    if isinstance(value, _SEED_INPUT_TYPES):
        return value
    if isinstance(value, datetime):
        return TimestampSeed(value)
    if isinstance(value, (tuple, list)):
        if len(value) != 2:
            raise InvalidSeedArgument(
                f"A seed pair needs exactly two values, got {len(value)}"
            )
        return PairSeed(value[0], value[1])
    return IntegerSeed(value)  # type: ignore[arg-type]
