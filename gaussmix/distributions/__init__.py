from .distribution import Distribution
from .normal import Normal, normal
from .multivariate import (
    MvNormal,
    multivariate_normal,
    multivariate_normal_log,
    multivariate_normal_sample,
)
from .mixture import GaussianMixture, MixtureComponent, gmm, gmm_sample

__all__ = [
    "Distribution",
    "Normal",
    "normal",
    "MvNormal",
    "multivariate_normal",
    "multivariate_normal_log",
    "multivariate_normal_sample",
    "GaussianMixture",
    "MixtureComponent",
    "gmm",
    "gmm_sample",
]
