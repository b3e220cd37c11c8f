from .operations import (
    determinant,
    inverse,
    log_determinant,
    cholesky_lower,
    mah_dist_squared,
)

__all__ = [
    "determinant",
    "inverse",
    "log_determinant",
    "cholesky_lower",
    "mah_dist_squared",
]
