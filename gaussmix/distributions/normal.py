# normal.py
from __future__ import annotations

import math
import numpy as np

from ..custom_types import Array, ArrayLike, Float, PRNG
from ..array_backend.utils import _ensure_count, _ensure_real_scalar, _ensure_vector, _ensure_matrix
from ..exceptions import PreconditionError
from .distribution import Distribution


def _check_sigma(sigma: float) -> float:
    sigma = _ensure_real_scalar(sigma)
    if not sigma > 0:
        raise PreconditionError("sigma must be > 0", {"sigma": sigma})
    return sigma


def normal(points: ArrayLike, mu: float, sigma: float) -> Array[Float]:
    """
    Univariate normal density N(mu, sigma^2) evaluated elementwise.

    Args:
        points: scalar or 1D sequence of observations.
        mu: mean.
        sigma: standard deviation, must be > 0.

    Returns:
        Array of shape (n,), same length as `points`.

    Raises:
        PreconditionError if sigma <= 0.
    """
    mu = _ensure_real_scalar(mu)
    sigma = _check_sigma(sigma)
    x = _ensure_vector(points)

    return np.exp(-((x - mu) ** 2) / (2.0 * sigma ** 2)) / (sigma * math.sqrt(2.0 * math.pi))


class Normal(Distribution):
    """Univariate Normal N(mu, sigma^2). Values have dimension 1."""

    def __init__(self, mu: float = 0.0, sigma: float = 1.0, *, rng: PRNG | None = None):
        super().__init__(rng=rng)
        self._mu = _ensure_real_scalar(mu)
        self._sigma = _check_sigma(sigma)

    @property
    def dim(self) -> int:
        return 1

    @property
    def mu(self) -> float:
        return self._mu

    @property
    def sigma(self) -> float:
        return self._sigma

    def sample(self, n_samples: int = 1) -> Array[Float]:
        """
        Draw (n, 1) samples.
        """
        n = _ensure_count(n_samples, "n_samples")
        return self._rng.normal(loc=self._mu, scale=self._sigma, size=(n, 1))

    def density(self, x: ArrayLike) -> Array[Float]:
        """Accepts scalar, (n,) or (n,1); returns (n,)."""
        x = _ensure_matrix(x, num_cols=1)
        return normal(x[:, 0], self._mu, self._sigma)

    def log_density(self, x: ArrayLike) -> Array[Float]:
        x = _ensure_matrix(x, num_cols=1)[:, 0]
        z = (x - self._mu) / self._sigma
        return -0.5 * z ** 2 - math.log(self._sigma) - 0.5 * math.log(2.0 * math.pi)

    def __repr__(self) -> str:
        return f"Normal(mu={self._mu}, sigma={self._sigma})"
