import pytest
import numpy as np

from gaussmix.config import reset_config


@pytest.fixture
def rng():
    return np.random.default_rng(42)

@pytest.fixture
def dim():
    return 3

@pytest.fixture
def mean(dim):
    return np.arange(dim, dtype=float)  # [0,1,2]

@pytest.fixture
def cov_matrix(dim):
    A = np.eye(dim) * 2.0
    A[0,1] = A[1,0] = 0.3
    return A

@pytest.fixture
def points(rng, dim):
    return rng.normal(size=(6, dim))

@pytest.fixture(autouse=True)
def default_config():
    reset_config()
    yield
    reset_config()
