# utils.py

from __future__ import annotations

import numpy as np

from .array_backend.utils import _ensure_count, _ensure_real_scalar
from .custom_types import Array, Float
from .exceptions import PreconditionError


def linspace(start: float, end: float, n: int) -> Array[Float]:
    """
    Return `n` evenly spaced values from `start` to `end`, both inclusive.

    The first and last elements are exactly `start` and `end`.

    Raises:
        PreconditionError if start >= end or n <= 1.
    """
    start = _ensure_real_scalar(start)
    end = _ensure_real_scalar(end)
    n = _ensure_count(n)
    if not start < end:
        raise PreconditionError("linspace requires start < end.", {"start": start, "end": end})
    if n <= 1:
        raise PreconditionError("linspace requires n > 1.", {"n": n})

    return np.linspace(start, end, n)
