"""Primitives on the probability simplex.

Validation of categorical distributions and the functionals built on it:
the Bhattacharyya coefficient, Hellinger distance, Shannon entropy and
the Kullback-Leibler and Jensen-Shannon divergences. Every function
checks its inputs with :func:`validate_simplex` before computing, so
callers never see NaN or a ``sqrt``/``log`` domain warning for invalid
input.

All quantities are in nats.
"""

from __future__ import annotations

import numpy as np
from scipy.special import entr, rel_entr

from infogeom._core import clamp_unit
from infogeom.exceptions import SimplexError
from infogeom.typing import ProbabilityArray, ProbabilityLike


def _check_tol(tol: float) -> float:
    try:
        tol = float(tol)
    except (TypeError, ValueError) as exc:
        raise SimplexError(f"tol must be a real number, got {tol!r}", "tol") from exc
    if not np.isfinite(tol) or tol < 0:
        raise SimplexError(f"tol must be finite and non-negative, got {tol}", "tol")
    return tol


def validate_simplex(
    p: ProbabilityLike, tol: float, name: str = "p"
) -> ProbabilityArray:
    """Validate that ``p`` is a categorical distribution.

    Parameters
    ----------
    p : array-like of shape (n_categories,)
        Candidate probability vector.
    tol : float
        Allowed absolute deviation of ``sum(p)`` from 1. Must be finite
        and non-negative.
    name : str, default="p"
        Argument name used in error messages.

    Returns
    -------
    ndarray of shape (n_categories,)
        ``p`` as a float64 array. The input is not copied if it already
        has that dtype.

    Raises
    ------
    SimplexError
        If ``p`` is not 1-D, is empty, has a negative or non-finite entry,
        or does not sum to 1 within ``tol``; or if ``tol`` is invalid.

    Examples
    --------
    >>> validate_simplex([0.5, 0.5], tol=1e-12)
    array([0.5, 0.5])
    """
    tol = _check_tol(tol)

    try:
        arr = np.asarray(p, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise SimplexError(f"{name} is not a numeric vector", name) from exc

    if arr.ndim != 1:
        raise SimplexError(f"{name} must be 1D, got {arr.ndim}D", name)

    if arr.size == 0:
        raise SimplexError(f"{name} cannot be empty", name)

    if not np.all(np.isfinite(arr)):
        raise SimplexError(f"{name} contains non-finite entries", name)

    if np.any(arr < 0):
        idx = int(np.argmax(arr < 0))
        raise SimplexError(
            f"{name} has a negative entry at index {idx}: {arr[idx]}", name
        )

    total = float(arr.sum())
    if abs(total - 1.0) > tol:
        raise SimplexError(
            f"{name} must sum to 1 within tol={tol}, got sum={total}", name
        )

    return arr


def _validate_pair(
    p: ProbabilityLike, q: ProbabilityLike, tol: float
) -> tuple[ProbabilityArray, ProbabilityArray]:
    p_arr = validate_simplex(p, tol, name="p")
    q_arr = validate_simplex(q, tol, name="q")
    if p_arr.shape != q_arr.shape:
        raise SimplexError(
            f"p and q must have the same length: p has {p_arr.size}, q has {q_arr.size}"
        )
    return p_arr, q_arr


def bhattacharyya_coeff(p: ProbabilityLike, q: ProbabilityLike, tol: float) -> float:
    r"""Bhattacharyya coefficient between two categorical distributions.

    .. math::
        BC(p, q) = \sum_i \sqrt{p_i q_i}

    The result is not clamped; rounding may put it slightly outside
    ``[0, 1]``.

    Parameters
    ----------
    p, q : array-like of shape (n_categories,)
        Probability vectors.
    tol : float
        Simplex tolerance, see :func:`validate_simplex`.

    Returns
    -------
    float
        The coefficient, 1 for identical and 0 for disjoint distributions.

    Raises
    ------
    SimplexError
        If either input is invalid or their lengths differ.
    """
    p_arr, q_arr = _validate_pair(p, q, tol)
    return float(np.sum(np.sqrt(p_arr * q_arr)))


def bhattacharyya_distance(
    p: ProbabilityLike, q: ProbabilityLike, tol: float
) -> float:
    """Bhattacharyya distance ``-ln(BC(p, q))``.

    Infinite for distributions with disjoint support.
    """
    bc = clamp_unit(bhattacharyya_coeff(p, q, tol))
    if bc == 0.0:
        return float("inf")
    return float(-np.log(bc))


def hellinger(p: ProbabilityLike, q: ProbabilityLike, tol: float) -> float:
    r"""Hellinger distance between two categorical distributions.

    .. math::
        H(p, q) = \sqrt{1 - BC(p, q)}

    The coefficient is clamped to ``[0, 1]`` first, so the result always
    lies in ``[0, 1]``.

    Parameters
    ----------
    p, q : array-like of shape (n_categories,)
        Probability vectors.
    tol : float
        Simplex tolerance, see :func:`validate_simplex`.

    Returns
    -------
    float
        Hellinger distance.

    Raises
    ------
    SimplexError
        If either input is invalid or their lengths differ.
    """
    bc = clamp_unit(bhattacharyya_coeff(p, q, tol))
    return float(np.sqrt(1.0 - bc))


def entropy(p: ProbabilityLike, tol: float) -> float:
    """Shannon entropy of ``p`` in nats. Zero-probability entries contribute 0."""
    p_arr = validate_simplex(p, tol, name="p")
    return float(np.sum(entr(p_arr)))


def kl_divergence(p: ProbabilityLike, q: ProbabilityLike, tol: float) -> float:
    """Kullback-Leibler divergence ``KL(p || q)`` in nats.

    Parameters
    ----------
    p, q : array-like of shape (n_categories,)
        Probability vectors.
    tol : float
        Simplex tolerance, see :func:`validate_simplex`.

    Returns
    -------
    float
        Non-negative divergence; ``inf`` if ``q`` is zero where ``p`` is not.
    """
    p_arr, q_arr = _validate_pair(p, q, tol)
    return float(np.sum(rel_entr(p_arr, q_arr)))


def jensen_shannon_divergence(
    p: ProbabilityLike, q: ProbabilityLike, tol: float
) -> float:
    """Jensen-Shannon divergence in nats, bounded by ``ln 2``."""
    p_arr, q_arr = _validate_pair(p, q, tol)
    m = 0.5 * (p_arr + q_arr)
    js = 0.5 * np.sum(rel_entr(p_arr, m)) + 0.5 * np.sum(rel_entr(q_arr, m))
    return float(max(js, 0.0))
