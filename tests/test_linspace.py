import numpy as np
import pytest

from gaussmix.exceptions import PreconditionError
from gaussmix.utils import linspace


def test_linspace_reference():
    res = linspace(0.0, 100.0, 7)
    ans = [0., 16.66666667, 33.33333333, 50., 66.66666667, 83.33333333, 100.]
    assert len(res) == 7
    np.testing.assert_allclose(res, ans, atol=1e-6)


@pytest.mark.parametrize("start, end, n", [(0.0, 1.0, 2), (-3.2, 7.1, 11), (0.1, 0.3, 3), (1e-3, 1e3, 1000)])
def test_linspace_endpoints_exact(start, end, n):
    res = linspace(start, end, n)
    assert len(res) == n
    assert res[0] == start
    assert res[-1] == end
    assert all(a < b for a, b in zip(res, res[1:]))


def test_linspace_matches_numpy():
    np.testing.assert_allclose(linspace(-1.0, 2.0, 13), np.linspace(-1.0, 2.0, 13), atol=1e-12)


@pytest.mark.parametrize("start, end, n", [(1.0, 1.0, 5), (2.0, 1.0, 5), (0.0, 1.0, 1), (0.0, 1.0, 0)])
def test_linspace_preconditions(start, end, n):
    with pytest.raises(PreconditionError):
        linspace(start, end, n)


def test_linspace_returns_ndarray():
    res = linspace(0.0, 1.0, 5)
    assert isinstance(res, np.ndarray)
    assert res.shape == (5,)
    assert res.dtype == np.float64
