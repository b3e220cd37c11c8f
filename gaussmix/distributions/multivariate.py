# multivariate.py
from __future__ import annotations

import logging
import math
import numpy as np

from ..config import get_config
from ..custom_types import Array, ArrayLike, Float, PRNG
from ..array_backend.utils import (
    _as_array,
    _ensure_count,
    _ensure_vector,
)
from ..exceptions import ShapeMismatchError, SingularMatrixError
from ..linalg.operations import cholesky_lower, inverse, log_determinant, mah_dist_squared
from .distribution import Distribution

logger = logging.getLogger(__name__)

LOG_TWO_PI = math.log(2.0 * math.pi)


def _as_points(points: ArrayLike) -> Array:
    """Return points as an (n, d) matrix; a single (d,) point becomes (1, d)."""
    X = _as_array(points)
    if X.ndim == 1:
        return X.reshape(1, -1)
    if X.ndim != 2:
        raise ShapeMismatchError(f"points must be (n, d) or (d,). Got shape {X.shape}.")
    return X


def _check_params(mu: ArrayLike, cov: ArrayLike) -> tuple[Array, Array]:
    """Return (mean (d,), cov (d, d)), raising ShapeMismatchError on disagreement."""
    mean = _ensure_vector(mu)
    C = _as_array(cov)
    if C.ndim != 2 or C.shape[0] != C.shape[1] or C.shape[0] != mean.shape[0]:
        raise ShapeMismatchError(
            "cov must be (d, d) and match mean dimension.",
            {"mean shape": mean.shape, "cov shape": C.shape},
        )
    return mean, C.copy()


def _check_inputs(points: ArrayLike, mu: ArrayLike, cov: ArrayLike) -> tuple[Array, Array, Array]:
    X = _as_points(points)
    mean, C = _check_params(mu, cov)
    if X.shape[1] != mean.shape[0]:
        raise ShapeMismatchError(
            "Dimension mismatch between points and mean.",
            {"points shape": X.shape, "mean shape": mean.shape, "cov shape": C.shape},
        )
    return X, mean, C


def _quadratic_form_and_logdet(points: ArrayLike, mu: ArrayLike, cov: ArrayLike) -> tuple[Array, float, int]:
    """Validate inputs; return (Mahalanobis terms (n,), log det(cov), d)."""
    X, mean, C = _check_inputs(points, mu, cov)

    logdet = log_determinant(C)
    det_tol = get_config().det_tol
    if det_tol > 0 and logdet <= math.log(det_tol):
        raise SingularMatrixError("Covariance matrix is singular (determinant below det_tol).",
                                  {"logdet": logdet, "det_tol": det_tol})
    precision = inverse(C)

    quad = mah_dist_squared(X, precision, mean)
    logger.debug("Evaluated Mahalanobis form for %d points of dimension %d", X.shape[0], mean.shape[0])
    return quad, logdet, mean.shape[0]


def multivariate_normal(points: ArrayLike, mu: ArrayLike, cov: ArrayLike) -> Array[Float]:
    """
    Multivariate normal density N(mu, cov) evaluated at each row of `points`.

    .. math::

        p(x_i) = (2\\pi)^{-d/2} \\det(C)^{-1/2} \\exp(-\\tfrac{1}{2} (x_i - \\mu)^\\top C^{-1} (x_i - \\mu))

    Args:
        points: (n, d) batch of points, or a single (d,) point.
        mu: (d,) mean vector.
        cov: (d, d) covariance matrix.

    Returns:
        Array of shape (n,), in row order of `points`.

    Raises:
        ShapeMismatchError: if the dimensions of points, mean and cov disagree.
        SingularMatrixError: if cov is singular or cannot be inverted.
    """
    return np.exp(multivariate_normal_log(points, mu, cov))


def multivariate_normal_log(points: ArrayLike, mu: ArrayLike, cov: ArrayLike) -> Array[Float]:
    """Log of `multivariate_normal`. Same arguments and errors.

    The log-determinant comes from `log_determinant`, so high-dimensional
    covariances whose determinant under- or overflows are still handled.
    """
    quad, logdet, d = _quadratic_form_and_logdet(points, mu, cov)
    return -0.5 * (d * LOG_TWO_PI + logdet + quad)


def _sample_from_chol(n: int, mean: Array, L: Array, rng: PRNG) -> Array[Float]:
    """Return n rows mean + L @ z with z ~ N(0, I)."""
    Z = rng.standard_normal(size=(n, mean.shape[0]))
    return mean + Z @ L.T


def multivariate_normal_sample(n: int, mu: ArrayLike, cov: ArrayLike,
                               *, rng: PRNG | None = None) -> Array[Float]:
    """
    Draw `n` independent samples from N(mu, cov).

    Each row is mu + L z, where L is the lower Cholesky factor of cov and z
    a vector of independent standard normals.

    Args:
        n: number of samples (non-negative).
        mu: (d,) mean vector.
        cov: (d, d) covariance matrix.
        rng: numpy Generator. A fresh `default_rng()` is used when omitted.

    Returns:
        Array of shape (n, d).

    Raises:
        PreconditionError: if n is not a non-negative integer.
        ShapeMismatchError: if mean and cov dimensions disagree.
        NotPositiveDefiniteError: if cov has no Cholesky factorization.
    """
    n = _ensure_count(n)
    mean, C = _check_params(mu, cov)
    L = cholesky_lower(C)
    rng = rng or np.random.default_rng()
    logger.debug("Drawing %d samples of dimension %d", n, mean.shape[0])
    return _sample_from_chol(n, mean, L, rng)


class MvNormal(Distribution):
    """
    Multivariate Normal N(mean, cov).

    The covariance is factorized at construction, so an instance always
    holds a covariance that admits a Cholesky factorization.
    """

    def __init__(self, mean: ArrayLike, cov: ArrayLike, *, rng: PRNG | None = None):
        super().__init__(rng=rng)
        self._mean, self._cov = _check_params(mean, cov)
        self._dim = self._mean.shape[0]

        # Covariance is represented via the lower root L such that C = L @ L.T.
        self._lower_chol = cholesky_lower(self._cov)

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def mean(self) -> Array[Float]:
        return self._mean.copy()

    @property
    def cov(self) -> Array[Float]:
        return self._cov.copy()

    @property
    def lower_chol(self) -> Array[Float]:
        return self._lower_chol.copy()

    def sample(self, n_samples: int = 1) -> Array[Float]:
        """
        Draw (n, d) samples.
        """
        n = _ensure_count(n_samples, "n_samples")
        return _sample_from_chol(n, self._mean, self._lower_chol, self._rng)

    def density(self, x: ArrayLike) -> Array[Float]:
        return multivariate_normal(x, self._mean, self._cov)

    def log_density(self, x: ArrayLike) -> Array[Float]:
        return multivariate_normal_log(x, self._mean, self._cov)

    def __repr__(self) -> str:
        return f"MvNormal(dim={self._dim})"
