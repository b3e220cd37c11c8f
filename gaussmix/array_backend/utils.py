# array_backend/utils.py
"""
Utility functions for array canonicalization used by gaussmix.

All functions that return arrays accept `copy: bool = True`. When `copy=True`
the returned array is guaranteed to be a different object from the input, so
results computed from it never alias caller data.

Shape problems are reported as `ShapeMismatchError` (a `ValueError`).
"""

from __future__ import annotations

import numpy as np
from typing import Any

from ..custom_types import Array, ArrayLike
from ..exceptions import PreconditionError, ShapeMismatchError


def _as_array(x: Any, dtype: Any = float) -> Array:
    try:
        return np.asarray(x, dtype=dtype)
    except (TypeError, ValueError) as e:
        raise TypeError(
            f"Could not convert input to array.\n"
            f"Input type: {type(x).__name__}\n"
            f"Input value: {repr(x)}\n"
            f"Original error: {e}"
        ) from e


def _is_numpy_scalar(x: Any) -> bool:
    """Return true if object is a numpy generic or Python scalar"""
    return np.isscalar(x) or isinstance(x, np.generic)


def _ensure_real_scalar(x: Any) -> float:
    """
    Return a Python float for inputs that contain a single real value.

    Accepts:
      - Python scalars (int, float)
      - numpy scalar types (np.float64(...), np.int32(...))
      - arrays with exactly one element

    Raises:
      ValueError if input contains more than one element or is complex.
    """
    if _is_numpy_scalar(x):
        if np.iscomplexobj(x):
            raise ValueError(f"_ensure_real_scalar: input is complex-valued: {x!r}")
        return float(x)

    arr = np.asarray(x)
    if arr.size != 1:
        raise ValueError(f"_ensure_real_scalar: input must contain exactly one element; got size={arr.size}, shape={arr.shape}")
    if np.iscomplexobj(arr):
        raise ValueError(f"_ensure_real_scalar: input is complex-valued (shape={arr.shape}).")
    return float(arr.item())


def _ensure_vector(x: ArrayLike, *, length: int | None = None, copy: bool = True) -> Array:
    """
    Ensure input is returned as a 1-D vector of shape (n,).

    Accepts:
      - 1D arrays -> (n,)
      - 2D arrays shaped (n,1) or (1,n) -> flattened
      - 0D scalar -> treated as length-1 vector (1,)

    Raises:
      ShapeMismatchError for incompatible shapes (ndim > 2, 2D with both dims > 1,
      or a length different from `length`).
    """
    arr = _as_array(x)

    if arr.ndim == 0:
        out = arr.reshape((1,))
    elif arr.ndim == 1:
        out = arr
    elif arr.ndim == 2 and 1 in arr.shape:
        out = np.ravel(arr)
    else:
        raise ShapeMismatchError(
            "_ensure_vector: input is not a vector (expected (n,), (n,1) or (1,n)).",
            {"shape": arr.shape},
        )

    if length is not None and out.size != length:
        raise ShapeMismatchError(f"_ensure_vector: required length {length}. Got {out.size}.")

    return out.copy() if copy else out


def _ensure_matrix(x: ArrayLike, *, as_row_matrix: bool = False,
                   num_rows: int | None = None, num_cols: int | None = None,
                   copy: bool = True) -> Array:
    """ Ensure input is a 2D matrix

    - Scalar inputs (0D) become arrays of shape (1, 1)
    - 1D inputs become:
        - shape (1, n) if as_row_matrix is True
        - shape (n, 1) if as_row_matrix is False
    - 2D inputs are passed through as is
    - Other shapes raise an error
    """
    arr = _as_array(x)

    if arr.ndim == 2:
        out = arr
    elif arr.ndim == 1:
        out = arr.reshape(1, -1) if as_row_matrix else arr.reshape(-1, 1)
    elif arr.ndim == 0:
        out = arr.reshape(1, 1)
    else:
        raise ShapeMismatchError(f"_ensure_matrix: Input cannot be converted to a 2D matrix. Shape {arr.shape}")

    if num_rows is not None and out.shape[0] != num_rows:
        raise ShapeMismatchError(f"_ensure_matrix: Required {num_rows} rows. Got {out.shape[0]}.")

    if num_cols is not None and out.shape[1] != num_cols:
        raise ShapeMismatchError(f"_ensure_matrix: Required {num_cols} columns. Got {out.shape[1]}.")

    return out.copy() if copy else out


def _ensure_square_matrix(x: ArrayLike, n: int | None = None, *, copy: bool = True) -> Array:
    """Ensure input is a 2d square matrix, optionally of dimension `n`."""
    arr = _as_array(x)
    if arr.ndim != 2:
        raise ShapeMismatchError(f"Expected 2D array, got {arr.ndim}D array", {"shape": arr.shape})

    num_rows, num_cols = arr.shape
    if num_rows != num_cols:
        raise ShapeMismatchError(f"Array is not square. Shape {arr.shape}")

    if n is not None and num_rows != n:
        raise ShapeMismatchError(f"Required matrix dimension {n}. Got {num_rows}.")

    return arr.copy() if copy else arr


def _ensure_count(n: Any, name: str = "n") -> int:
    """Return `n` as a non-negative Python int."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise PreconditionError(f"{name} must be a non-negative integer.", {name: n})
    if n < 0:
        raise PreconditionError(f"{name} must be a non-negative integer.", {name: n})
    return int(n)
