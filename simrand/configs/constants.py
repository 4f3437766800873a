"""Generator constants for simrand.

These values are frozen: changing any of them changes every sequence the
library produces and invalidates recorded fixtures.
"""

import os

# Project paths
PACKAGE_ROOT: str = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
DEFAULT_CONFIG_PATH: str = os.path.join(PACKAGE_ROOT, "configs", "templates", "default.ini")

# Configuration file handling
REQUIRED_SECTION: str = "generator_settings"
SUPPORTED_CONFIG_EXTENSIONS: tuple[str, ...] = (".ini", ".json", ".yaml", ".yml")

# Seed words are unsigned 32-bit integers
WORD_BITS: int = 32
WORD_MODULUS: int = 2**WORD_BITS
HALF_WORD_BITS: int = 16
HALF_WORD_MASK: int = 0xFFFF

# (w, z) pair used when no seed is supplied
DEFAULT_SEEDS: tuple[int, int] = (521288629, 362436069)

# Multiply-with-carry multipliers for the w and z words
W_MULTIPLIER: int = 18000
Z_MULTIPLIER: int = 36969

# (uint32 + 1) * UNIFORM_SCALE lies strictly inside (0, 1)
UNIFORM_SCALE: float = 2.328306435454494e-10

# Spacing between the second seed words of successive thread-local generators
THREAD_SEED_STRIDE: int = 0x9E3779B9
