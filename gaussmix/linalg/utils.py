# linalg/utils.py

from __future__ import annotations

import numpy as np

from ..custom_types import Array, ArrayLike
from ..array_backend.utils import _ensure_real_scalar, _ensure_square_matrix
from ..exceptions import PreconditionError, ShapeMismatchError


def add_diag_jitter(matrix: ArrayLike, jitter: float | ArrayLike = 1e-6, *, copy: bool = True) -> Array:
    """
    Return a new matrix = matrix + jitter * I.

    The jitter is typically a small constant intended to promote numerical
    positive definiteness for Cholesky factorizations.

    Args:
      matrix: 2D square array-like
      jitter: scalar or array-like of length n (interpreted elementwise)
      copy: if True (default) operate on and return a copy; if False, update
            the input in place when it is already a float ndarray.

    Returns:
      Array with jitter added to diagonal.

    Raises:
        ShapeMismatchError on invalid shapes, PreconditionError on non-real
        jitter values.
    """
    mat = _ensure_square_matrix(matrix, copy=copy)
    n = mat.shape[0]

    jitter_arr = np.asarray(jitter)
    if np.iscomplexobj(jitter_arr):
        raise PreconditionError("add_diag_jitter: jitter contains complex values.")
    if jitter_arr.ndim == 0:
        jitter_arr = np.full((n,), _ensure_real_scalar(jitter_arr))
    elif jitter_arr.ndim == 1:
        if jitter_arr.shape != (n,):
            raise ShapeMismatchError(f"add_diag_jitter: jitter must be scalar or shape ({n},). Got {jitter_arr.shape}.")
    else:
        raise ShapeMismatchError(f"add_diag_jitter: jitter must be scalar or 1D array. Got ndim={jitter_arr.ndim}.")

    diag_idcs = np.diag_indices(n)
    mat[diag_idcs] = mat[diag_idcs] + jitter_arr
    return mat


def symmetrize(matrix: ArrayLike) -> Array:
    """Return (matrix + matrix.T) / 2 as a new array."""
    C = _ensure_square_matrix(matrix, copy=False)
    return 0.5 * (C + C.T)
