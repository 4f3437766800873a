"""Distribution samplers built on the core uniform generator.

Every sampler validates its parameters before it draws, so a rejected call
leaves the generator's sequence exactly where it was.
"""

import math
import numbers
from collections.abc import Callable

import numpy as np

from simrand.configs.errors import InvalidDistributionParameter
from simrand.core.generator import CoreGenerator

__all__ = ["DistributionSampler", "DISTRIBUTIONS"]

# Samplers reachable through DistributionSampler.sample
DISTRIBUTIONS: tuple[str, ...] = (
    "uniform",
    "normal",
    "exponential",
    "triangular",
    "gamma",
    "inverse_gamma",
    "beta",
    "chi_square",
    "weibull",
    "dirichlet",
    "laplace",
    "cauchy",
    "student_t",
    "log_normal",
)

# Marsaglia-Tsang squeeze constant
_SQUEEZE = 0.0331


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidDistributionParameter(f"{name} must be finite, got {value}")


def _require_positive(name: str, value: float) -> None:
    """
    Check that a shape, scale or degrees-of-freedom parameter is usable.

    :param name: Parameter name used in the error message
    :type name: str
    :param value: Parameter value
    :type value: float
    :raises InvalidDistributionParameter: If the value is not finite and strictly positive
    """
    if not (math.isfinite(value) and value > 0):
        raise InvalidDistributionParameter(
            f"{name} must be strictly positive, got {value}"
        )


def _normalize_log_draws(log_draws: list[float]) -> list[float]:
    # Shift by the largest value so the biggest weight is exactly 1
    peak = max(log_draws)
    weights = [math.exp(value - peak) for value in log_draws]
    total = sum(weights)
    return [weight / total for weight in weights]


class DistributionSampler:
    """
    Draw samples from common continuous distributions.

    All randomness comes from the wrapped ``CoreGenerator``; the sampler
    itself holds no state.

    :param generator: The uniform generator to draw from
    :type generator: CoreGenerator
    """

    def __init__(self, generator: CoreGenerator) -> None:
        self.generator = generator

    def uniform(self, lower: float = 0.0, upper: float = 1.0) -> float:
        """Return a uniform draw from the open interval (lower, upper)."""
        return self.generator.uniform(lower, upper)

    def normal(self, mean: float = 0.0, standard_deviation: float = 1.0) -> float:
        """
        Sample a normal distribution using the Box-Muller transform.

        Each pair of uniforms yields two independent deviates; the second is
        held by the generator and returned by the next call.

        :param mean: Mean of the distribution
        :type mean: float
        :param standard_deviation: Standard deviation, strictly positive
        :type standard_deviation: float
        :return: Normally distributed sample
        :rtype: float
        :raises InvalidDistributionParameter: If the standard deviation is not positive
        """
        _require_finite("mean", mean)
        _require_positive("standard_deviation", standard_deviation)
        return mean + standard_deviation * self._standard_normal()

    def exponential(self, mean: float = 1.0) -> float:
        """
        Sample an exponential distribution by inverse transform.

        :param mean: Mean of the distribution (1 / rate), strictly positive
        :type mean: float
        :return: Exponentially distributed sample
        :rtype: float
        :raises InvalidDistributionParameter: If the mean is not positive
        """
        _require_positive("mean", mean)
        # F^(-1)(U) = -mean * ln(U)
        return -mean * math.log(self.generator.uniform_open01())

    def triangular(self, lower: float, mode: float, upper: float) -> float:
        """
        Sample a triangular distribution by inverse transform.

        :param lower: Lower limit
        :type lower: float
        :param mode: Most likely value, between the limits
        :type mode: float
        :param upper: Upper limit, not below the lower limit
        :type upper: float
        :return: Sample in [lower, upper]; ``lower`` itself when the limits meet
        :rtype: float
        :raises InvalidDistributionParameter: If the mode lies outside the limits

        Example:
            >>> sampler.triangular(0.0, 1.0, 1.0)  # mean 2/3
        """
        for name, value in (("lower", lower), ("mode", mode), ("upper", upper)):
            _require_finite(name, value)
        if not lower <= mode <= upper:
            raise InvalidDistributionParameter(
                f"triangular mode {mode} lies outside [{lower}, {upper}]"
            )

        width = upper - lower
        u = self.generator.uniform_open01()
        if width == 0.0:
            return lower
        if u < (mode - lower) / width:
            return lower + math.sqrt(u * width * (mode - lower))
        return upper - math.sqrt((1.0 - u) * width * (upper - mode))

    def gamma(self, shape: float, scale: float) -> float:
        """
        Sample a gamma distribution.

        Uses Marsaglia and Tsang's method for shape >= 1. Smaller shapes are
        boosted to shape + 1 and corrected with ``U ** (1 / shape)``.

        :param shape: Shape parameter, strictly positive
        :type shape: float
        :param scale: Scale parameter, strictly positive
        :type scale: float
        :return: Gamma distributed sample
        :rtype: float
        :raises InvalidDistributionParameter: If shape or scale is not positive
        """
        _require_positive("shape", shape)
        _require_positive("scale", scale)
        return scale * self._standard_gamma(shape)

    def inverse_gamma(self, shape: float, scale: float) -> float:
        """Sample an inverse gamma distribution as 1 / gamma(shape, 1 / scale)."""
        _require_positive("shape", shape)
        _require_positive("scale", scale)
        return scale / self._standard_gamma(shape)

    def beta(self, a: float, b: float) -> float:
        """Sample a beta distribution from the ratio of two gamma draws."""
        _require_positive("a", a)
        _require_positive("b", b)
        log_x = self._log_standard_gamma(a)
        log_y = self._log_standard_gamma(b)
        return _normalize_log_draws([log_x, log_y])[0]

    def chi_square(self, degrees_of_freedom: float) -> float:
        """Sample a chi-square distribution as gamma(df / 2, 2)."""
        _require_positive("degrees_of_freedom", degrees_of_freedom)
        return 2.0 * self._standard_gamma(0.5 * degrees_of_freedom)

    def weibull(self, shape: float, scale: float) -> float:
        """
        Sample a Weibull distribution by inverse transform.

        :param shape: Shape parameter, strictly positive
        :param scale: Scale parameter, strictly positive
        :return: Weibull distributed sample
        :raises InvalidDistributionParameter: If shape or scale is not positive
        """
        _require_positive("shape", shape)
        _require_positive("scale", scale)
        return scale * (-math.log(self.generator.uniform_open01())) ** (1.0 / shape)

    def dirichlet(self, *alphas: float) -> list[float]:
        """
        Sample a Dirichlet distribution.

        Draws one gamma(alpha, 1) variate per parameter and normalizes by
        their sum. The draws are kept as logarithms so that tiny alphas, whose
        gamma variates underflow to zero, still give a probability vector.

        :param alphas: Concentration parameters, each strictly positive
        :return: One component per parameter; the components sum to 1
        :rtype: list[float]
        :raises InvalidDistributionParameter: If no parameters are given or any is
            not positive
        """
        if not alphas:
            raise InvalidDistributionParameter("dirichlet requires at least one alpha")
        for index, alpha in enumerate(alphas):
            _require_positive(f"alpha[{index}]", alpha)

        return _normalize_log_draws([self._log_standard_gamma(alpha) for alpha in alphas])

    def laplace(self, mean: float = 0.0, scale: float = 1.0) -> float:
        """
        Sample a Laplace distribution by inverse transform.

        :param mean: Location of the distribution
        :param scale: Scale parameter, strictly positive
        :return: Laplace distributed sample, symmetric around ``mean``
        :raises InvalidDistributionParameter: If the scale is not positive
        """
        _require_finite("mean", mean)
        _require_positive("scale", scale)
        u = self.generator.uniform_open01()
        if u < 0.5:
            return mean + scale * math.log(2.0 * u)
        return mean - scale * math.log(2.0 * (1.0 - u))

    def cauchy(self, median: float = 0.0, scale: float = 1.0) -> float:
        """Sample a Cauchy distribution by inverse transform."""
        _require_finite("median", median)
        _require_positive("scale", scale)
        return median + scale * math.tan(math.pi * (self.generator.uniform_open01() - 0.5))

    def student_t(self, degrees_of_freedom: float) -> float:
        """Sample Student's t as normal() / sqrt(chi_square(df) / df)."""
        _require_positive("degrees_of_freedom", degrees_of_freedom)
        numerator = self._standard_normal()
        chi_square = 2.0 * self._standard_gamma(0.5 * degrees_of_freedom)
        return numerator / math.sqrt(chi_square / degrees_of_freedom)

    def log_normal(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        """Sample a log-normal distribution as exp(normal(mu, sigma))."""
        return math.exp(self.normal(mu, sigma))

    def sample(self, distribution: str, size: int, *args: float) -> np.ndarray:
        """
        Draw several samples of one distribution.

        :param distribution: Sampler name, one of ``DISTRIBUTIONS``
        :type distribution: str
        :param size: Number of samples to draw
        :type size: int
        :param args: Positional parameters passed to the sampler
        :return: Array of shape ``(size,)``, or ``(size, len(args))`` for dirichlet
        :rtype: np.ndarray
        :raises InvalidDistributionParameter: If the name is unknown or size is negative

        Example:
            >>> sampler.sample("triangular", 1000, 0.0, 0.5, 1.0).mean()
        """
        if distribution not in DISTRIBUTIONS:
            raise InvalidDistributionParameter(
                f"Unknown distribution {distribution!r}, expected one of {DISTRIBUTIONS}"
            )
        if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size < 0:
            raise InvalidDistributionParameter(
                f"size must be a non-negative integer, got {size!r}"
            )

        draw: Callable[..., float | list[float]] = getattr(self, distribution)
        samples = np.array([draw(*args) for _ in range(size)], dtype=float)
        if distribution == "dirichlet":
            return samples.reshape(size, len(args))
        return samples

    def _standard_normal(self) -> float:
        cached = self.generator.take_cached_normal()
        if cached is not None:
            return cached

        radius = math.sqrt(-2.0 * math.log(self.generator.uniform_open01()))
        theta = 2.0 * math.pi * self.generator.uniform_open01()
        self.generator.cache_normal(radius * math.sin(theta))
        return radius * math.cos(theta)

    def _standard_gamma(self, shape: float) -> float:
        """Gamma(shape, 1) draw; parameters are validated by the caller."""
        if shape < 1.0:
            return math.exp(self._log_standard_gamma(shape))

        d = shape - 1.0 / 3.0
        c = 1.0 / math.sqrt(9.0 * d)
        while True:
            while True:
                x = self._standard_normal()
                v = 1.0 + c * x
                if v > 0.0:
                    break
            v = v * v * v
            u = self.generator.uniform_open01()
            if u < 1.0 - _SQUEEZE * x**4:
                return d * v
            if math.log(u) < 0.5 * x * x + d * (1.0 - v + math.log(v)):
                return d * v

    def _log_standard_gamma(self, shape: float) -> float:
        """Logarithm of a gamma(shape, 1) draw.

        Shapes below 1 draw gamma(shape + 1) and add ``log(U) / shape``, which
        stays finite where the product ``U ** (1 / shape)`` would underflow.
        """
        if shape < 1.0:
            boosted = self._standard_gamma(shape + 1.0)
            return math.log(boosted) + math.log(self.generator.uniform_open01()) / shape
        return math.log(self._standard_gamma(shape))
