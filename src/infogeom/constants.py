"""Constants for numerical stability on the probability simplex.

These are true constants that should not be user-configurable.
Tolerances are passed per call; the values here only scale them.
"""

SNAP_TOLERANCE_FACTOR: float = 10.0
"""Multiple of the caller's ``tol`` within which a Bhattacharyya coefficient is snapped to 1."""
