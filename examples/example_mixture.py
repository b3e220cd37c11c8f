"""
Example: Two-component Gaussian mixture in 2D
---------------------------------------------

Evaluates a mixture density on a grid built with `linspace`, draws samples
from the mixture, and checks that the grid density integrates to roughly one.

Mixture:
    p(x) = 0.4 N(x; (-1, 0), I) + 0.6 N(x; (2, 1), [[1, .5], [.5, 1]])
"""

import numpy as np
from gaussmix import GaussianMixture, MixtureComponent, gmm, linspace


components = [
    MixtureComponent(mean=[-1.0, 0.0], cov=np.eye(2), weight=0.4),
    MixtureComponent(mean=[2.0, 1.0], cov=[[1.0, 0.5], [0.5, 1.0]], weight=0.6),
]

xs = linspace(-6.0, 7.0, 131)
ys = linspace(-5.0, 6.0, 111)
grid = np.array([[x, y] for x in xs for y in ys])

density = gmm(grid, components)
cell = (xs[1] - xs[0]) * (ys[1] - ys[0])
print("Grid integral of density:", density.sum() * cell)

mixture = GaussianMixture(components, rng=np.random.default_rng(0))
samples = mixture.sample(1000)
print("Sample mean:", samples.mean(axis=0))
print("Mixture mean:", 0.4 * np.array([-1.0, 0.0]) + 0.6 * np.array([2.0, 1.0]))
