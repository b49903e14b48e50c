"""This module describes a scalar wrapper for values drawn from a categorical
array, which remembers the level set and orderedness of its parent.

pandas does not expose categorical scalars: indexing into a categorical
series returns the bare category.  :class:`CategoricalValue` fills this gap
so that individual elements can be classified as ``Multiclass[N]`` or
``OrderedFactor[N]``.
"""
from __future__ import annotations
from typing import Any, Iterator

import pandas as pd


class CategoricalValue:
    """A single value together with the levels it was drawn from.

    Parameters
    ----------
    value : Any
        The observed category.  This must be one of ``categories``.
    categories : Iterable
        The full level set of the parent array, in order.
    ordered : bool, default False
        Indicates whether the levels have a meaningful order.

    Examples
    --------
    .. doctest::

        >>> v = CategoricalValue("b", ["a", "b", "c"], ordered=True)
        >>> v
        CategoricalValue('b', levels=3, ordered=True)
        >>> v < CategoricalValue("c", ["a", "b", "c"], ordered=True)
        True
    """

    __slots__ = ("value", "categories", "ordered")

    def __init__(self, value: Any, categories, ordered: bool = False):
        categories = tuple(categories)
        if value not in categories:
            raise ValueError(f"{repr(value)} is not one of {categories}")
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "categories", categories)
        object.__setattr__(self, "ordered", bool(ordered))

    @property
    def code(self) -> int:
        """The integer code of this value within its level set."""
        return self.categories.index(self.value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, CategoricalValue):
            return (
                self.value == other.value and
                self.categories == other.categories
            )
        return self.value == other

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: CategoricalValue) -> bool:
        if not self.ordered:
            raise TypeError("unordered categories cannot be compared")
        if not isinstance(other, CategoricalValue):
            return NotImplemented
        if other.categories != self.categories:
            raise TypeError("categories must match to compare values")
        return self.code < other.code

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({repr(self.value)}, "
            f"levels={len(self.categories)}, ordered={self.ordered})"
        )


def categorical_values(series: pd.Series) -> Iterator[Any]:
    """Iterate over a categorical series, yielding :class:`CategoricalValue`
    objects for observed values and ``pd.NA`` for missing ones.
    """
    dtype = series.dtype
    if not isinstance(dtype, pd.CategoricalDtype):
        raise TypeError(f"series must be categorical, not {dtype}")

    categories = list(dtype.categories)
    for code in series.cat.codes:
        if code < 0:
            yield pd.NA
        else:
            yield CategoricalValue(categories[code], categories, dtype.ordered)
