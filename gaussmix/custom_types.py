# custom_types.py
"""
Type aliases shared across gaussmix.

We generally following the conventions:
- Annotate function input with `ArrayLike`
- Annotate function output with `Array`
"""
from __future__ import annotations
from typing import TypeAlias
from numpy.random import Generator as NumpyRNG

from numpy.typing import (
    NDArray as NumpyArray,
    ArrayLike as NumpyArrayLike
)

from numpy import floating as NumpyFloating

Array = NumpyArray
ArrayLike: TypeAlias = NumpyArrayLike
Float: TypeAlias = NumpyFloating
PRNG: TypeAlias = NumpyRNG
