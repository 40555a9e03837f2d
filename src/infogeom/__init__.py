"""Information geometry primitives for categorical distributions.

Distances on the probability simplex:

- :func:`rao_distance_categorical`, the Fisher-Rao geodesic distance;
- :func:`hellinger`, the Hellinger distance.

:mod:`infogeom.simplex` provides simplex validation and the entropy and
divergence functionals the distances are built on.

Examples
--------
>>> import infogeom
>>> p = [0.7, 0.2, 0.1]
>>> q = [0.1, 0.2, 0.7]
>>> rao = infogeom.rao_distance_categorical(p, q, 1e-12)
>>> hel = infogeom.hellinger(p, q, 1e-12)
>>> 0.0 <= hel <= 1.0
True
"""

from infogeom._primitives import SimplexPrimitives
from infogeom._version import __version__
from infogeom.constants import SNAP_TOLERANCE_FACTOR
from infogeom.distance import hellinger, rao_distance_categorical
from infogeom.exceptions import DomainError, InfogeomError, SimplexError
from infogeom.simplex import (
    bhattacharyya_coeff,
    bhattacharyya_distance,
    entropy,
    jensen_shannon_divergence,
    kl_divergence,
    validate_simplex,
)

__all__ = [
    "__version__",
    "rao_distance_categorical",
    "hellinger",
    "bhattacharyya_coeff",
    "bhattacharyya_distance",
    "entropy",
    "kl_divergence",
    "jensen_shannon_divergence",
    "validate_simplex",
    "SimplexPrimitives",
    "SNAP_TOLERANCE_FACTOR",
    "InfogeomError",
    "SimplexError",
    "DomainError",
]
