"""This module describes the scitypes of containers: fixed-size tuples,
homogeneous arrays, and tables.
"""
from __future__ import annotations
from typing import Any

from .base import (
    ScientificType, Union, as_dimension, as_scitype, issubtype
)
from .scalar import KnownType


class TupleType(ScientificType):
    """The scitype of a fixed-size heterogeneous sequence.

    Parameters
    ----------
    *elements : ScientificType
        The scitype of each element, in order.

    Notes
    -----
    Tuple types are covariant: ``Tuple[Count, Count]`` is a subtype of
    ``Tuple[Infinite, Count]``.  Tuples of different lengths are never
    related.
    """

    name = "Tuple"
    parameter_names = ("elements",)

    def validate_parameters(self, *parameters: Any) -> tuple:
        return tuple(as_scitype(p, "tuple element") for p in parameters)

    def admits_parameters(self, parameters: tuple) -> bool:
        if len(parameters) != len(self.parameters):
            return False
        return all(
            issubtype(theirs, ours)
            for theirs, ours in zip(parameters, self.parameters)
        )

    @property
    def elements(self) -> tuple[ScientificType, ...] | None:
        return self.parameters


class ArrayType(ScientificType):
    """The scitype of a homogeneous sequence.

    Parameters
    ----------
    element : ScientificType
        The union of all observed element scitypes.
    ndim : int | None, default 1
        The number of dimensions.  ``None`` admits arrays of any
        dimensionality.

    Examples
    --------
    .. doctest::

        >>> Array(Union(Count, Missing))
        Array[Union[Count, Missing]]
        >>> Array(Count) in Array(Infinite)
        True
        >>> Array(Count, 2) in Array(Count)
        False
    """

    name = "Array"
    parameter_names = ("element", "ndim")

    def validate_parameters(self, *parameters: Any) -> tuple:
        if len(parameters) == 1:
            parameters = (parameters[0], 1)
        element, ndim = super().validate_parameters(*parameters)
        if ndim is not None:
            ndim = as_dimension(ndim, "ndim")
        return (as_scitype(element, "element"), ndim)

    def admits_parameters(self, parameters: tuple) -> bool:
        element, ndim = parameters
        if self.ndim is not None and ndim != self.ndim:
            return False
        return issubtype(element, self.element)

    @property
    def element(self) -> ScientificType | None:
        return None if self.parameters is None else self.parameters[0]

    @property
    def ndim(self) -> int | None:
        return None if self.parameters is None else self.parameters[1]

    def __repr__(self) -> str:
        if self.parameters is None:
            return self.name
        if self.ndim == 1:
            return f"{self.name}[{self.element}]"
        return f"{self.name}[{self.element}, {self.ndim}]"


class TableType(KnownType):
    """The scitype of a table.

    Parameters
    ----------
    columns : ScientificType
        The union of the scitypes of every column.  Each column contributes
        an ``Array[U]`` member, where ``U`` is its element scitype.

    Notes
    -----
    Calling the unparameterized instance with element scitypes builds the
    supertype used for table checks:

    .. code:: python

        Table(T1, T2, ..., Tn) == Table[Union[Array[T1], ..., Array[Tn]]]

    so that ``scitype(X) in Table(T1, ..., Tn)`` holds iff every column of
    ``X`` has an element scitype that is a subtype of some ``Tj``.  Bracket
    syntax, ``Table[K]``, sets the column union directly.

    Examples
    --------
    .. doctest::

        >>> import pandas as pd
        >>> X = pd.DataFrame({"x1": [1.0, 2.0], "x2": ["a", "b"]})
        >>> scitype(X) in Table(Continuous, Textual)
        True
        >>> scitype(X) in Table(Continuous)
        False
    """

    name = "Table"
    parameter_names = ("columns",)

    def validate_parameters(self, *parameters: Any) -> tuple:
        (columns,) = super().validate_parameters(*parameters)
        return (as_scitype(columns, "columns"),)

    def admits_parameters(self, parameters: tuple) -> bool:
        return issubtype(parameters[0], self.columns)

    @property
    def columns(self) -> ScientificType | None:
        return None if self.parameters is None else self.parameters[0]

    def __call__(self, *types: ScientificType) -> TableType:
        """Build ``Table[Union[Array[T1], ..., Array[Tn]]]``."""
        if self.parameters is not None:
            raise TypeError(f"{self} is already parameterized")
        return TableType(
            Union(*(ArrayType(as_scitype(t, "column")) for t in types))
        )

    def __getitem__(self, key: Any) -> TableType:
        if self.parameters is not None:
            raise TypeError(f"{self} is already parameterized")
        return TableType(key)


Tuple = TupleType()
Array = ArrayType()
Table = TableType()
