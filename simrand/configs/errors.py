"""Exception classes for simrand."""


class SimRandomError(ValueError):
    """Base exception for simrand errors.

    Derives from ValueError so callers that already guard numeric input
    with ``except ValueError`` keep working.
    """


class InvalidSeedArgument(SimRandomError):
    """Raised when a seed value cannot be used.

    Covers negative seed values, timestamps before the Unix epoch and seed
    inputs of an unsupported type. Raised when the seed is assigned, never
    on a later draw.
    """


class InvalidDistributionParameter(SimRandomError):
    """Raised when a sampling call receives an unusable parameter.

    This exception is raised before the generator advances, so a rejected
    call leaves the random sequence untouched.
    """


class ConfigError(SimRandomError):
    """Base exception for configuration errors."""


class ConfigFileNotFoundError(ConfigError):
    """Raised when a configuration file cannot be found."""


class ConfigParseError(ConfigError):
    """Raised when a configuration file cannot be parsed.

    This exception is raised when a file exists but has an unsupported
    extension, invalid syntax, or values of the wrong type.
    """
