# mixture.py
"""
Finite Gaussian mixtures.

A mixture is an ordered sequence of `MixtureComponent` triples
(mean, cov, weight). Its density is the weighted sum of the component
multivariate normal densities. Weights are used as given: they are not
normalized, and only `gmm_sample` (which draws component labels from them)
requires them to sum to one.
"""
from __future__ import annotations

import logging
from typing import Iterable, NamedTuple, Sequence

import numpy as np

from ..custom_types import Array, ArrayLike, Float, PRNG
from ..array_backend.utils import _ensure_count, _ensure_real_scalar
from ..exceptions import PreconditionError, ShapeMismatchError
from ..linalg.operations import cholesky_lower
from .distribution import Distribution
from .multivariate import MvNormal, _as_points, _check_params, _sample_from_chol, multivariate_normal

logger = logging.getLogger(__name__)

# Tolerance on |sum(weights) - 1| when weights are used as probabilities.
WEIGHT_SUM_ATOL = 1e-8


class MixtureComponent(NamedTuple):
    """One mixture component: mean (d,), covariance (d, d) and mixing weight."""
    mean: ArrayLike
    cov: ArrayLike
    weight: float


ComponentLike = MixtureComponent | tuple


def _as_components(components: Iterable[ComponentLike]) -> list[MixtureComponent]:
    out = []
    for k, comp in enumerate(components):
        try:
            mean, cov, weight = comp
        except (TypeError, ValueError) as e:
            raise PreconditionError(f"Component {k} must be a (mean, cov, weight) triple.") from e
        try:
            weight = _ensure_real_scalar(weight)
        except ValueError as e:
            raise PreconditionError(f"Weight of component {k} must be a real scalar.", {"weight": weight}) from e
        if not np.isfinite(weight) or weight < 0:
            raise PreconditionError(f"Weight of component {k} must be finite and non-negative.", {"weight": weight})
        out.append(MixtureComponent(mean, cov, weight))
    return out


def _check_probabilities(weights: Array) -> None:
    if weights.size == 0:
        raise PreconditionError("Cannot sample from a mixture with no components.")
    total = float(weights.sum())
    if abs(total - 1.0) > WEIGHT_SUM_ATOL:
        raise PreconditionError("Mixture weights must sum to one to be used as probabilities.",
                                {"sum": total})


def gmm(points: ArrayLike, components: Sequence[ComponentLike]) -> Array[Float]:
    """
    Gaussian mixture density evaluated at each row of `points`.

    Computes ``sum_k weight_k * multivariate_normal(points, mean_k, cov_k)``,
    accumulating components in the given order.

    Args:
        points: (n, d) batch of points, or a single (d,) point.
        components: sequence of `MixtureComponent` or (mean, cov, weight) triples.
            An empty sequence yields zeros.

    Returns:
        Array of shape (n,).

    Raises:
        ShapeMismatchError, SingularMatrixError: from any component; the whole
            call fails, no partial sum is returned.
        PreconditionError: if a component is malformed or has a negative weight.
    """
    comps = _as_components(components)
    X = _as_points(points)

    pdf = np.zeros(X.shape[0])
    for comp in comps:
        pdf = pdf + comp.weight * multivariate_normal(X, comp.mean, comp.cov)

    logger.debug("Evaluated %d-component mixture at %d points", len(comps), X.shape[0])
    return pdf


def gmm_sample(n: int, components: Sequence[ComponentLike],
               *, rng: PRNG | None = None) -> Array[Float]:
    """
    Draw `n` samples from a Gaussian mixture.

    A component label is drawn for every sample with probabilities equal to
    the weights, then each sample is drawn from its component's normal.

    Returns:
        Array of shape (n, d).

    Raises:
        PreconditionError: if there are no components, the weights do not sum
            to one, or n is invalid.
        ShapeMismatchError: if component dimensions disagree.
        NotPositiveDefiniteError: if a covariance has no Cholesky factorization.
    """
    n = _ensure_count(n)
    comps = _as_components(components)
    weights = np.array([c.weight for c in comps], dtype=float)
    _check_probabilities(weights)

    params = [_check_params(c.mean, c.cov) for c in comps]
    dim = params[0][0].shape[0]
    if any(mean.shape[0] != dim for mean, _ in params):
        raise ShapeMismatchError("All mixture components must have the same dimension.",
                                 {"dimensions": [mean.shape[0] for mean, _ in params]})
    chols = [cholesky_lower(C) for _, C in params]

    rng = rng or np.random.default_rng()
    labels = rng.choice(len(comps), size=n, p=weights / weights.sum())

    out = np.empty((n, dim))
    for k, ((mean, _), L) in enumerate(zip(params, chols)):
        idx = labels == k
        out[idx] = _sample_from_chol(int(idx.sum()), mean, L, rng)
    return out


class GaussianMixture(Distribution):
    """
    Finite Gaussian mixture sum_k w_k N(mean_k, cov_k).

    Components are validated at construction (shapes, positive-definite
    covariances, non-negative weights). Sampling additionally requires the
    weights to sum to one.
    """

    def __init__(self, components: Sequence[ComponentLike], *, rng: PRNG | None = None):
        super().__init__(rng=rng)
        comps = _as_components(components)
        if not comps:
            raise PreconditionError("GaussianMixture requires at least one component.")

        self._components = [MvNormal(c.mean, c.cov, rng=self._rng) for c in comps]
        self._weights = np.array([c.weight for c in comps], dtype=float)

        dims = [c.dim for c in self._components]
        if len(set(dims)) != 1:
            raise ShapeMismatchError("All mixture components must have the same dimension.",
                                     {"dimensions": dims})
        self._dim = dims[0]

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def n_components(self) -> int:
        return len(self._components)

    @property
    def weights(self) -> Array[Float]:
        return self._weights.copy()

    @property
    def components(self) -> list[MixtureComponent]:
        return [MixtureComponent(c.mean, c.cov, float(w))
                for c, w in zip(self._components, self._weights)]

    def sample(self, n_samples: int = 1) -> Array[Float]:
        """
        Draw (n, d) samples.
        """
        n = _ensure_count(n_samples, "n_samples")
        _check_probabilities(self._weights)
        labels = self._rng.choice(self.n_components, size=n, p=self._weights / self._weights.sum())

        out = np.empty((n, self._dim))
        for k, comp in enumerate(self._components):
            idx = labels == k
            out[idx] = comp.sample(int(idx.sum()))
        return out

    def density(self, x: ArrayLike) -> Array[Float]:
        return gmm(x, self.components)

    def __repr__(self) -> str:
        return f"GaussianMixture(dim={self._dim}, n_components={self.n_components})"
