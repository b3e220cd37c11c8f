# tests/array_backend/test_array_backend_utils.py
import numpy as np
import pytest

from gaussmix.array_backend import utils as U
from gaussmix.exceptions import PreconditionError, ShapeMismatchError


def test_ensure_real_scalar_accepts_python_numpy_and_0d():
    assert U._ensure_real_scalar(3) == 3.0
    assert isinstance(U._ensure_real_scalar(np.float32(2.0)), float)
    assert U._ensure_real_scalar(np.array(4.0)) == 4.0
    assert U._ensure_real_scalar([[5.0]]) == 5.0


@pytest.mark.parametrize(
    "non_scalar_input",
    [[1,2], np.arange(2), np.identity(2)]
)
def test_ensure_real_scalar_rejects_multiple_elements(non_scalar_input):
    with pytest.raises(ValueError):
        U._ensure_real_scalar(non_scalar_input)


def test_ensure_real_scalar_rejects_complex():
    with pytest.raises(ValueError):
        U._ensure_real_scalar(1 + 2j)
    with pytest.raises(ValueError):
        U._ensure_real_scalar(np.array([1 + 0j]))


def test_ensure_vector_shapes():
    assert U._ensure_vector(5).shape == (1,)
    assert U._ensure_vector([1, 2, 3]).shape == (3,)
    assert U._ensure_vector(np.array([[1, 2, 3]]), length=3).shape == (3,)
    assert U._ensure_vector(np.array([[1], [2]])).shape == (2,)


def test_ensure_vector_rejects_matrix_and_wrong_length():
    with pytest.raises(ShapeMismatchError):
        U._ensure_vector(np.eye(2))
    with pytest.raises(ShapeMismatchError):
        U._ensure_vector([1.0, 2.0], length=3)


def test_ensure_vector_copies():
    x = np.array([1.0, 2.0])
    out = U._ensure_vector(x)
    assert out is not x
    out[0] = 10.0
    assert x[0] == 1.0


def test_ensure_matrix_row_and_column():
    assert U._ensure_matrix([1, 2, 3]).shape == (3, 1)
    assert U._ensure_matrix([1, 2, 3], as_row_matrix=True).shape == (1, 3)
    assert U._ensure_matrix(2.0).shape == (1, 1)
    with pytest.raises(ShapeMismatchError):
        U._ensure_matrix(np.zeros((2, 2)), num_cols=3)
    with pytest.raises(ShapeMismatchError):
        U._ensure_matrix(np.zeros((2, 2, 2)))


def test_ensure_square_matrix():
    assert U._ensure_square_matrix(np.eye(3), n=3).shape == (3, 3)
    with pytest.raises(ShapeMismatchError):
        U._ensure_square_matrix(np.zeros((2, 3)))
    with pytest.raises(ShapeMismatchError):
        U._ensure_square_matrix(np.eye(2), n=3)
    with pytest.raises(ShapeMismatchError):
        U._ensure_square_matrix([1.0, 2.0])


@pytest.mark.parametrize("bad", [-1, 2.0, True, "3"])
def test_ensure_count_rejects(bad):
    with pytest.raises(PreconditionError):
        U._ensure_count(bad)


def test_ensure_count_accepts_numpy_int():
    assert U._ensure_count(np.int64(4)) == 4
    assert U._ensure_count(0) == 0
