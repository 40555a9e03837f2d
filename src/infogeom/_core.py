"""Core numeric helpers with no internal dependencies.

This module holds the scalar stabilization steps shared by the distance
functions and the simplex primitives. It imports nothing from infogeom,
avoiding circular import issues.
"""

import numpy as np


def clamp_unit(x: float) -> float:
    """Clamp a scalar into the closed unit interval.

    Rounding in a sum of square roots can give values such as
    ``1.0000000000000002`` or ``-1e-17``, which are outside the domain
    of ``arccos`` and ``sqrt(1 - x)``.

    Parameters
    ----------
    x : float
        Value to clamp.

    Returns
    -------
    float
        ``x`` limited to ``[0, 1]``.
    """
    return float(np.clip(x, 0.0, 1.0))


def snap_to_identity(bc: float, threshold: float) -> float:
    """Return exactly 1.0 when ``bc`` is within ``threshold`` of 1.

    Parameters
    ----------
    bc : float
        Bhattacharyya coefficient, already clamped to ``[0, 1]``.
    threshold : float
        Maximum ``|1 - bc|`` treated as equality.

    Returns
    -------
    float
        ``1.0`` if the snap applies, otherwise ``bc`` unchanged.
    """
    if abs(1.0 - bc) <= threshold:
        return 1.0
    return bc
