"""Exception types raised by infogeom.

Two kinds exist. :class:`SimplexError` reports inputs that are not valid
probability vectors; it comes from the simplex primitives and reaches the
caller unchanged. :class:`DomainError` is reserved for checks made by the
distance functions themselves. No public function raises it today, but it
is part of the error surface so such checks can be added later.

Both subclass :class:`ValueError`.
"""

from __future__ import annotations


class InfogeomError(Exception):
    """Base class for all infogeom errors."""


class SimplexError(InfogeomError, ValueError):
    """An input is not a probability vector within the given tolerance.

    Parameters
    ----------
    message : str
        Description of the violated condition.
    argument : str, optional
        Name of the offending argument (``"p"``, ``"q"``, ``"tol"``).
    """

    def __init__(self, message: str, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument


class DomainError(InfogeomError, ValueError):
    """A value fell outside the domain of a local computation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"domain error: {self.message}"
