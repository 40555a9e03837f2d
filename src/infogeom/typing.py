"""Type definitions for the infogeom package."""

from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

# Array types
ProbabilityArray = NDArray[np.float64]  # Shape: (n_categories,)

# Anything accepted where a probability vector is expected
ProbabilityLike = Union[Sequence[float], ProbabilityArray]
