"""Unit tests for simrand.core.generator module."""

import math
from datetime import datetime
from unittest.mock import patch

import pytest

from simrand.configs.constants import DEFAULT_SEEDS, UNIFORM_SCALE
from simrand.configs.errors import InvalidDistributionParameter, InvalidSeedArgument
from simrand.core.generator import CoreGenerator

# First draws from DEFAULT_SEEDS, frozen as regression fixtures
DEFAULT_UINT32_SEQUENCE = [820856226, 2331188998, 4033440000]
PAIR_1_2_UINT32_SEQUENCE = [550651472, 2842876160, 2457330511]


class TestSeeding:
    """Tests for CoreGenerator seed handling."""

    def test_default_construction_uses_default_seeds(self) -> None:
        assert CoreGenerator().seeds == DEFAULT_SEEDS

    def test_construction_with_pair_sets_both_words(self) -> None:
        assert CoreGenerator((1, 2)).seeds == (1, 2)

    def test_construction_with_negative_seed_raises(self) -> None:
        with pytest.raises(InvalidSeedArgument):
            CoreGenerator((-1, 3))

    def test_construction_with_none_seeds_from_clock(self, frozen_clock: datetime) -> None:
        """Test that None selects time-based seeding."""
        assert CoreGenerator(None).seeds == (628393424, 2245012672)

    def test_set_seeds_returns_new_pair(self) -> None:
        generator = CoreGenerator()

        assert generator.set_seeds((5, 6)) == (5, 6)
        assert generator.seeds == (5, 6)

    def test_set_seed_is_alias_of_set_seeds(self) -> None:
        generator = CoreGenerator()
        generator.set_seed(1)

        assert generator.seeds == (521288629, 1)

    def test_failed_set_seeds_keeps_previous_state(self) -> None:
        """Test that a rejected seed leaves the generator untouched."""
        # Arrange
        generator = CoreGenerator((1, 2))

        # Act
        with pytest.raises(InvalidSeedArgument):
            generator.set_seeds(-5)

        # Assert
        assert generator.seeds == (1, 2)

    def test_set_seeds_drops_cached_normal(self) -> None:
        """Test that reseeding discards the spare normal deviate."""
        # Arrange
        generator = CoreGenerator()
        generator.cache_normal(1.25)

        # Act
        generator.set_seeds((1, 2))

        # Assert
        assert generator.take_cached_normal() is None

    def test_reseeding_restarts_sequence(self) -> None:
        """Test that restoring the seeds replays the same draws."""
        # Arrange
        generator = CoreGenerator()
        first_run = [generator.uniform_open01() for _ in range(20)]

        # Act
        generator.set_seeds(DEFAULT_SEEDS)
        second_run = [generator.uniform_open01() for _ in range(20)]

        # Assert
        assert first_run == second_run


class TestNextUint32:
    """Tests for the multiply-with-carry step."""

    def test_default_seeds_produce_recorded_sequence(self) -> None:
        generator = CoreGenerator()

        assert [generator.next_uint32() for _ in range(3)] == DEFAULT_UINT32_SEQUENCE

    def test_seed_pair_produces_recorded_sequence(self) -> None:
        generator = CoreGenerator((1, 2))

        assert [generator.next_uint32() for _ in range(3)] == PAIR_1_2_UINT32_SEQUENCE

    def test_step_updates_both_words(self) -> None:
        """Test the state after one step from the default seeds."""
        generator = CoreGenerator()
        generator.next_uint32()

        assert generator.seeds == (275137954, 812916871)

    def test_draws_stay_within_32_bits(self) -> None:
        generator = CoreGenerator((2**32 - 1, 2**32 - 1))

        for _ in range(1000):
            assert 0 <= generator.next_uint32() < 2**32


class TestUniformOpen01:
    """Tests for CoreGenerator.uniform_open01."""

    def test_first_draw_matches_recorded_value(self) -> None:
        generator = CoreGenerator()

        assert generator.uniform_open01() == (DEFAULT_UINT32_SEQUENCE[0] + 1) * UNIFORM_SCALE

    def test_draws_lie_strictly_inside_unit_interval(self) -> None:
        """Test the open bounds over many draws."""
        generator = CoreGenerator()

        for _ in range(10000):
            u = generator.uniform_open01()
            assert 0.0 < u < 1.0

    @pytest.mark.parametrize("raw", [0, 2**32 - 1])
    def test_extreme_raw_values_stay_inside_bounds(self, raw: int) -> None:
        """Test that the smallest and largest raw draws map inside (0, 1)."""
        generator = CoreGenerator()

        with patch.object(generator, "next_uint32", return_value=raw):
            u = generator.uniform_open01()

        assert 0.0 < u < 1.0

    def test_identical_seeds_produce_identical_sequences(self) -> None:
        first = CoreGenerator((12345, 67890))
        second = CoreGenerator((12345, 67890))

        assert [first.uniform_open01() for _ in range(1000)] == [
            second.uniform_open01() for _ in range(1000)
        ]

    def test_different_integer_seeds_diverge(self) -> None:
        """Test that distinct seeds give observably different sequences."""
        # Arrange
        first = CoreGenerator()
        first.set_seed(2)
        second = CoreGenerator()
        second.set_seed(1234512343214134)

        # Act
        first_draws = [math.floor(first.uniform(0, 10)) for _ in range(100)]
        second_draws = [math.floor(second.uniform(0, 10)) for _ in range(100)]

        # Assert
        assert first_draws != second_draws

    def test_fixed_point_seeds_do_not_freeze_the_stream(self) -> None:
        """Test that seeding both words on their step fixed points still varies."""
        generator = CoreGenerator((0x464FFFFF, 0x9068FFFF))
        reference = CoreGenerator()

        draws = [generator.uniform_open01() for _ in range(100)]

        assert draws == [reference.uniform_open01() for _ in range(100)]
        assert len(set(draws)) > 1


class TestUniform:
    """Tests for CoreGenerator.uniform."""

    def test_default_bounds_match_open_unit_draw(self) -> None:
        first = CoreGenerator()
        second = CoreGenerator()

        assert first.uniform() == second.uniform_open01()

    def test_scaled_draw_stays_within_bounds(self) -> None:
        generator = CoreGenerator()

        for _ in range(1000):
            assert -3.0 < generator.uniform(-3.0, 7.5) < 7.5

    def test_scaled_draw_uses_linear_transform(self) -> None:
        """Test that uniform(lower, upper) is lower + U * (upper - lower)."""
        generator = CoreGenerator()
        reference = CoreGenerator()

        assert generator.uniform(2.0, 6.0) == 2.0 + reference.uniform_open01() * 4.0

    @pytest.mark.parametrize(
        "lower, upper",
        [
            (1.0, 1.0),
            (2.0, 1.0),
            (0.0, float("nan")),
            (float("-inf"), 0.0),
            (0.0, float("inf")),
        ],
    )
    def test_invalid_bounds_raise_without_advancing(self, lower: float, upper: float) -> None:
        """Test that bad bounds are rejected before drawing."""
        generator = CoreGenerator()

        with pytest.raises(InvalidDistributionParameter):
            generator.uniform(lower, upper)

        assert generator.seeds == DEFAULT_SEEDS

    def test_repr_shows_seeds(self) -> None:
        assert repr(CoreGenerator((1, 2))) == "CoreGenerator(seeds=(1, 2))"
