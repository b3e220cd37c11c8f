# distribution.py
from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from ..custom_types import Array, ArrayLike, Float, PRNG


class Distribution(ABC):
    """
    Abstract base class for the distribution objects in gaussmix.

    Parameters are validated once at construction; the methods below then
    delegate to the functional density/sampling routines.

    Shape policy:
      - sample(n) -> (n, d)
      - density(x), log_density(x) -> (n,), one value per row of x
    """

    def __init__(self, *, rng: PRNG | None = None) -> None:
        self._rng = rng or np.random.default_rng()

    @property
    @abstractmethod
    def dim(self) -> int:
        """Dimension d of a single value."""
        ...

    @abstractmethod
    def sample(self, n_samples: int = 1) -> Array[Float]:
        """Draw (n, d) samples."""
        ...

    @abstractmethod
    def density(self, x: ArrayLike) -> Array[Float]:
        """Compute p(x) for each row of x."""
        ...

    def log_density(self, x: ArrayLike) -> Array[Float]:
        """Compute log p(x) for each row of x. Default takes log of `density`."""
        with np.errstate(divide="ignore"):
            return np.log(self.density(x))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(dim={self.dim})"
