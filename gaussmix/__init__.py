import logging

from gaussmix.distributions import (
    Distribution,
    Normal,
    normal,
    MvNormal,
    multivariate_normal,
    multivariate_normal_log,
    multivariate_normal_sample,
    GaussianMixture,
    MixtureComponent,
    gmm,
    gmm_sample,
)
from gaussmix.exceptions import (
    GaussMixError,
    ShapeMismatchError,
    SingularMatrixError,
    NotPositiveDefiniteError,
    PreconditionError,
)
from gaussmix.config import NumericalConfig, get_config, set_config, reset_config
from gaussmix.utils import linspace

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
