"""Constants, exceptions and configuration loading for simrand.

Import the loader directly to avoid circular imports:
    from simrand.configs.config import load_config
"""

from simrand.configs.errors import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigParseError,
    InvalidDistributionParameter,
    InvalidSeedArgument,
    SimRandomError,
)

__all__ = [
    "SimRandomError",
    "InvalidSeedArgument",
    "InvalidDistributionParameter",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
]
