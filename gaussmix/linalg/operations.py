# linalg/operations.py
"""
Dense linear algebra used by the density and sampling routines.

`determinant`, `log_determinant`, `inverse` and `cholesky_lower` wrap
numpy/scipy and translate their failures into the gaussmix error taxonomy.
`mah_dist_squared` computes the per-row quadratic form (x_i - m)^T P (x_i - m)
without forming the (n, n) cross product.
"""

from __future__ import annotations

import logging

import numpy as np
import scipy.linalg

from ..config import get_config
from ..custom_types import Array, ArrayLike
from ..array_backend.utils import _ensure_matrix, _ensure_square_matrix
from ..exceptions import NotPositiveDefiniteError, SingularMatrixError
from .utils import add_diag_jitter, symmetrize

logger = logging.getLogger(__name__)


def determinant(A: ArrayLike) -> float:
    """Return det(A). Raises SingularMatrixError if it is not finite."""
    A = _ensure_square_matrix(A, copy=False)
    det = float(np.linalg.det(A))
    if not np.isfinite(det):
        raise SingularMatrixError("Determinant is not finite.", {"det": det, "shape": A.shape})
    return det


def log_determinant(A: ArrayLike) -> float:
    """Return log det(A) via `np.linalg.slogdet`.

    Raises SingularMatrixError unless the determinant is positive and the
    log-determinant finite.
    """
    A = _ensure_square_matrix(A, copy=False)
    sign, logdet = np.linalg.slogdet(A)
    if not (sign > 0 and np.isfinite(logdet)):
        raise SingularMatrixError("Log-determinant undefined: matrix is singular or has non-positive determinant.",
                                  {"sign": float(sign), "logdet": float(logdet), "shape": A.shape})
    return float(logdet)


def inverse(A: ArrayLike) -> Array:
    """Return A^{-1} as a new array. Raises SingularMatrixError on failure."""
    A = _ensure_square_matrix(A, copy=False)
    try:
        inv = np.linalg.inv(A)
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError("Matrix inversion failed.", {"shape": A.shape}) from e
    if not np.all(np.isfinite(inv)):
        raise SingularMatrixError("Matrix inverse contains non-finite values.", {"shape": A.shape})
    return inv


def _is_symmetric(C: Array, rtol: float = 1e-8) -> bool:
    scale = float(np.abs(C).max(initial=0.0))
    return np.allclose(C, C.T, rtol=rtol, atol=rtol * scale)


def _cholesky(C: Array) -> Array:
    try:
        return scipy.linalg.cholesky(C, lower=True)
    except (np.linalg.LinAlgError, ValueError) as e:
        raise NotPositiveDefiniteError(
            "Cholesky factorization failed; matrix is not positive definite.",
            {"shape": C.shape},
        ) from e


def cholesky_lower(A: ArrayLike) -> Array:
    """Return lower-triangular L such that A = L @ L.T.

    Honors the active `NumericalConfig`: optionally symmetrizes the matrix
    first (otherwise a non-symmetric matrix is rejected), and if
    `cholesky_jitter` is positive retries once with the jitter added to the
    diagonal.

    Raises:
        NotPositiveDefiniteError if the factorization fails.
    """
    config = get_config()
    C = _ensure_square_matrix(A, copy=True)
    if config.symmetrize:
        C = symmetrize(C)
    elif not _is_symmetric(C):
        raise NotPositiveDefiniteError("Cholesky factorization requires a symmetric matrix.", {"shape": C.shape})

    try:
        return _cholesky(C)
    except NotPositiveDefiniteError:
        if config.cholesky_jitter <= 0:
            raise
        logger.warning("Cholesky factorization failed; retrying with diagonal jitter %g",
                       config.cholesky_jitter)
        return _cholesky(add_diag_jitter(C, jitter=config.cholesky_jitter))


def mah_dist_squared(x: ArrayLike, precision: ArrayLike, mean: ArrayLike | None = None) -> Array:
    """ Compute squared Mahalanobis distance(s) of rows of `x` from `mean`

    For a precision matrix :math:`P = C^{-1}` the squared distance is

    .. math::

        D_i^2 = (x_i - m)^\\top P (x_i - m), \\quad i = 1, \\ldots, n.

    Computed row-wise as ``sum(Xc * (Xc @ P), axis=1)``, which equals the
    diagonal of ``Xc @ P @ Xc.T`` in row order.

    Args:
        x: ArrayLike, of shape (d,) or (n, d).
        precision: ArrayLike, shape (d, d).
        mean: ArrayLike or None, shape (d,). Defaults to the zero vector.

    Returns:
        Array of shape (n,)
    """
    P = _ensure_square_matrix(precision, copy=False)
    d = P.shape[0]
    X = _ensure_matrix(x, as_row_matrix=True, num_cols=d)
    if mean is not None:
        X = X - _ensure_matrix(mean, as_row_matrix=True, num_rows=1, num_cols=d, copy=False)

    XP = X @ P
    return np.sum(X * XP, axis=1)
