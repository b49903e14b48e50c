"""This module describes the closed set of native value shapes that
conventions dispatch on.
"""
from __future__ import annotations
import decimal
from enum import Enum
import numbers
from typing import Any

import numpy as np
import pandas as pd

from scitypes.util import table
from scitypes.util.type_hints import ImageLike, Leveled


class Shape(Enum):
    """The native shape of a value, as seen by the classifier."""

    MISSING = "missing"
    INTEGRAL = "integral"
    NUMERIC = "numeric"
    TEXTUAL = "textual"
    LEVELED = "leveled"
    IMAGE = "image"
    TUPLE = "tuple"
    SEQUENCE = "sequence"
    TABLE = "table"
    OTHER = "other"


SEQUENCES = (
    list,
    range,
    np.ndarray,
    pd.Series,
    pd.Index,
    pd.api.extensions.ExtensionArray,
)


def is_missing(value: Any) -> bool:
    """Check whether a scalar is a missing-value marker.

    ``None``, ``pandas.NA``, ``pandas.NaT``, and ``NaN`` (float, numpy or
    decimal) are all treated as missing.
    """
    if value is None:
        return True
    if not pd.api.types.is_scalar(value):
        return False
    return bool(pd.isna(value))


def shape_of(value: Any) -> Shape:
    """Determine the native shape of a value.

    Containers are recognized first (tables, then tuples, then sequences), so
    that their members can be classified recursively.  Scalars are then
    checked for missingness before their kind is determined.

    Examples
    --------
    .. doctest::

        >>> shape_of(3)
        <Shape.INTEGRAL: 'integral'>
        >>> shape_of([1, 2])
        <Shape.SEQUENCE: 'sequence'>
        >>> shape_of(float("nan"))
        <Shape.MISSING: 'missing'>
    """
    if table.is_table(value):
        return Shape.TABLE
    if isinstance(value, tuple):
        return Shape.TUPLE
    if isinstance(value, SEQUENCES):
        return Shape.SEQUENCE
    if is_missing(value):
        return Shape.MISSING
    if isinstance(value, (bool, np.bool_, numbers.Integral)):
        return Shape.INTEGRAL
    if isinstance(value, (numbers.Real, decimal.Decimal)):
        return Shape.NUMERIC
    if isinstance(value, str):
        return Shape.TEXTUAL
    if isinstance(value, Leveled):
        return Shape.LEVELED
    if isinstance(value, ImageLike):
        return Shape.IMAGE
    return Shape.OTHER
