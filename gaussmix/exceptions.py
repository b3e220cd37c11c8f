# exceptions.py
"""
Exception classes raised by gaussmix.

Every failure of a density or sampling routine is reported by raising one of
the classes below; no routine returns a partial result. Shape and
precondition errors also derive from `ValueError`, and matrix errors from
`numpy.linalg.LinAlgError`, so callers catching the builtin/numpy types keep
working.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np


class GaussMixError(Exception):
    """Base class for all gaussmix errors.

    Attributes:
        message: The primary error message.
        context: Extra diagnostic values (shapes, offending values, ...).
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.context = context or {}

        full_message = message
        if self.context:
            context_str = "\n".join(f"  {k}: {v}" for k, v in self.context.items())
            full_message += f"\n\nContext:\n{context_str}"

        super().__init__(full_message)


class ShapeMismatchError(GaussMixError, ValueError):
    """Dimensions of points, mean and covariance disagree."""


class SingularMatrixError(GaussMixError, np.linalg.LinAlgError):
    """Matrix determinant is zero (or not usable) or inversion failed."""


class NotPositiveDefiniteError(GaussMixError, np.linalg.LinAlgError):
    """Cholesky factorization failed."""


class PreconditionError(GaussMixError, ValueError):
    """Argument violates a documented precondition (e.g. sigma <= 0, n <= 1)."""


__all__ = [
    "GaussMixError",
    "ShapeMismatchError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "PreconditionError",
]
