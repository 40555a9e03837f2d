"""Pluggable simplex primitives used by the distance functions.

The distance functions never validate inputs themselves. They ask a
primitives object for the Bhattacharyya coefficient (or the Hellinger
distance), and that object owns the simplex checks. By default this is
:mod:`infogeom.simplex`; tests and callers may pass any object with the
same two methods.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from infogeom import simplex
from infogeom.typing import ProbabilityLike


@runtime_checkable
class SimplexPrimitives(Protocol):
    """Interface the distance functions rely on."""

    def bhattacharyya_coeff(
        self, p: ProbabilityLike, q: ProbabilityLike, tol: float
    ) -> float: ...

    def hellinger(self, p: ProbabilityLike, q: ProbabilityLike, tol: float) -> float: ...


class _ModulePrimitives:
    """Binds :class:`SimplexPrimitives` to :mod:`infogeom.simplex`."""

    def bhattacharyya_coeff(
        self, p: ProbabilityLike, q: ProbabilityLike, tol: float
    ) -> float:
        return simplex.bhattacharyya_coeff(p, q, tol)

    def hellinger(self, p: ProbabilityLike, q: ProbabilityLike, tol: float) -> float:
        return simplex.hellinger(p, q, tol)

    def __repr__(self) -> str:
        return "<SimplexPrimitives infogeom.simplex>"


DEFAULT_PRIMITIVES: SimplexPrimitives = _ModulePrimitives()


def resolve_primitives(primitives: SimplexPrimitives | None) -> SimplexPrimitives:
    """Return ``primitives``, or the default binding if it is None."""
    if primitives is None:
        return DEFAULT_PRIMITIVES
    return primitives
