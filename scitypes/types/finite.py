"""This module describes the finite scitypes, which are parameterized by their
number of levels.
"""
from __future__ import annotations
from typing import Any

from .base import as_dimension
from .scalar import KnownType


class FiniteType(KnownType):
    """Values drawn from a finite set of ``N`` levels.

    Parameters
    ----------
    n_levels : int, optional
        The number of levels.  If omitted, the type admits any number of
        levels.

    Examples
    --------
    .. doctest::

        >>> Finite(3)
        Finite[3]
        >>> Multiclass(3) in Finite
        True
        >>> Multiclass(3) in Finite(5)
        False
    """

    name = "Finite"
    parameter_names = ("n_levels",)

    def validate_parameters(self, *parameters: Any) -> tuple:
        (n_levels,) = super().validate_parameters(*parameters)
        return (as_dimension(n_levels, "n_levels", minimum=0),)

    @property
    def n_levels(self) -> int | None:
        """The number of levels, or ``None`` if unparameterized."""
        if self.parameters is None:
            return None
        return self.parameters[0]


class MulticlassType(FiniteType):
    """Unordered classes."""

    name = "Multiclass"


class OrderedFactorType(FiniteType):
    """Classes with a meaningful order."""

    name = "OrderedFactor"


Finite = FiniteType()
Multiclass = MulticlassType()
OrderedFactor = OrderedFactorType()
Binary = Finite(2)
