"""Unit tests for simrand.configs.constants module."""

import os

from simrand.configs import constants


class TestConstants:
    """Frozen generator constants."""

    def test_default_seeds(self) -> None:
        assert constants.DEFAULT_SEEDS == (521288629, 362436069)

    def test_default_seeds_fit_in_a_word(self) -> None:
        assert all(0 < seed < constants.WORD_MODULUS for seed in constants.DEFAULT_SEEDS)

    def test_uniform_scale_keeps_draws_inside_unit_interval(self) -> None:
        """Test that the smallest and largest raw draws scale into (0, 1)."""
        assert 0.0 < (0 + 1) * constants.UNIFORM_SCALE
        assert (constants.WORD_MODULUS - 1 + 1) * constants.UNIFORM_SCALE < 1.0

    def test_half_word_mask_matches_bits(self) -> None:
        assert constants.HALF_WORD_MASK == 2**constants.HALF_WORD_BITS - 1

    def test_thread_seed_stride_is_odd(self) -> None:
        assert constants.THREAD_SEED_STRIDE % 2 == 1

    def test_default_config_template_exists(self) -> None:
        assert os.path.isfile(constants.DEFAULT_CONFIG_PATH)
