import numpy as np
import pytest

from gaussmix.config import (
    NumericalConfig,
    config_from_env,
    get_config,
    reset_config,
    set_config,
)
from gaussmix.distributions import multivariate_normal
from gaussmix.exceptions import PreconditionError, SingularMatrixError


def test_defaults():
    cfg = get_config()
    assert cfg == NumericalConfig()
    assert cfg.cholesky_jitter == 0.0
    assert cfg.symmetrize is False
    assert cfg.det_tol == 0.0


def test_set_and_reset():
    set_config(cholesky_jitter=1e-8, symmetrize=True)
    assert get_config().cholesky_jitter == 1e-8
    assert get_config().symmetrize is True
    reset_config()
    assert get_config() == NumericalConfig()


def test_set_rejects_unknown_and_invalid():
    with pytest.raises(PreconditionError):
        set_config(tolerance=1.0)
    with pytest.raises(PreconditionError):
        set_config(cholesky_jitter=-1.0)
    with pytest.raises(PreconditionError):
        set_config(symmetrize="yes")


def test_env_overrides():
    cfg = config_from_env({"GAUSSMIX_CHOLESKY_JITTER": "1e-6", "GAUSSMIX_SYMMETRIZE": "true"})
    assert cfg.cholesky_jitter == 1e-6
    assert cfg.symmetrize is True
    assert cfg.det_tol == 0.0


def test_env_invalid_value():
    with pytest.raises(PreconditionError):
        config_from_env({"GAUSSMIX_DET_TOL": "abc"})
    with pytest.raises(PreconditionError):
        config_from_env({"GAUSSMIX_SYMMETRIZE": "maybe"})


def test_det_tol_marks_near_singular():
    cov = np.diag([1.0, 1e-10])
    assert multivariate_normal(np.zeros((1, 2)), np.zeros(2), cov)[0] > 0
    set_config(det_tol=1e-8)
    with pytest.raises(SingularMatrixError):
        multivariate_normal(np.zeros((1, 2)), np.zeros(2), cov)
